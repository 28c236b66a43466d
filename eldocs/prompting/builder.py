"""Builds role-aware prompts for delegated documentation."""

from __future__ import annotations

from typing import List

from ..models import MethodFact, TypeDocument
from .constants import (
    PROMPT_DEP_TREE,
    PROMPT_DIAGRAMS,
    PROMPT_DRAW_TREE,
    PROMPT_GENERIC,
    PROMPT_HEADER,
    STEREOTYPE_SUFFIXES,
)


class PromptBuilder:
    """Assembles the natural-language description request for one type.

    The output is a pure function of the document: identity block, method bullets in
    declaration order, an optional dependency tree block, a stereotype-specific
    instruction and a closing request for diagrams.
    """

    def build(self, document: TypeDocument) -> str:
        parts: List[str] = [PROMPT_HEADER]
        parts.append(f"Class: {document.name}\n")
        parts.append(f"Type: {document.stereotype.value}\n")
        parts.append(f"Description: {document.description}\n")
        parts.append("Methods:\n")
        for method in document.methods:
            parts.append(f"{format_method(method)}\n")
        if document.dependencies:
            parts.append(PROMPT_DEP_TREE)
            for dependency in document.dependencies:
                parts.append(f"- {dependency}\n")
            parts.append(PROMPT_DRAW_TREE)
        parts.append(STEREOTYPE_SUFFIXES.get(document.stereotype, PROMPT_GENERIC))
        parts.append(PROMPT_DIAGRAMS)
        return "".join(parts)


def format_method(method: MethodFact) -> str:
    """Render one method bullet as ``- name(): doc``."""
    return f"- {method.name}(): {method.doc}"


__all__ = ["PromptBuilder", "format_method"]
