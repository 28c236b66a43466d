"""Shared text fragments for delegated documentation prompts."""

from __future__ import annotations

from ..models import Stereotype

SYSTEM_PROMPT = "You are a helpful technical documentation assistant."

PROMPT_HEADER = "Generate documentation in Markdown format for the following Java class.\n"
PROMPT_DEP_TREE = "\nDependencies (tree):\n"
PROMPT_DRAW_TREE = "\nDraw a dependency tree showing how this class depends on these objects.\n"
PROMPT_DIAGRAMS = "\nInclude diagrams and summary overview where appropriate."

PROMPT_REPOSITORY = (
    "\nThis is a Spring Data Repository. Document its purpose, main queries, and usage examples."
)
PROMPT_SERVICE = (
    "\nThis is a Service class. Document its business logic, main responsibilities, "
    "and how it interacts with other layers."
)
PROMPT_REST_CONTROLLER = (
    "\nThis is a REST Controller. Document its endpoints, request/response models, "
    "and example usages."
)
PROMPT_GENERIC = "\nProvide a general overview, usage, and responsibilities."

STEREOTYPE_SUFFIXES: dict[Stereotype, str] = {
    Stereotype.REPOSITORY: PROMPT_REPOSITORY,
    Stereotype.SERVICE: PROMPT_SERVICE,
    Stereotype.REST_CONTROLLER: PROMPT_REST_CONTROLLER,
    Stereotype.CONTROLLER: PROMPT_REST_CONTROLLER,
}


__all__ = [
    "PROMPT_DEP_TREE",
    "PROMPT_DIAGRAMS",
    "PROMPT_DRAW_TREE",
    "PROMPT_GENERIC",
    "PROMPT_HEADER",
    "STEREOTYPE_SUFFIXES",
    "SYSTEM_PROMPT",
]
