"""Tests for the delegated-mode prompt builder."""

from __future__ import annotations

from eldocs.models import MethodFact, Stereotype, TypeDocument
from eldocs.prompting.builder import PromptBuilder
from eldocs.prompting.constants import (
    PROMPT_DEP_TREE,
    PROMPT_GENERIC,
    PROMPT_REPOSITORY,
    PROMPT_REST_CONTROLLER,
    PROMPT_SERVICE,
)


def _document(stereotype: Stereotype = Stereotype.SERVICE, dependencies=("Logger",)) -> TypeDocument:  # type: ignore[no-untyped-def]
    return TypeDocument(
        name="Widget",
        package="com.example",
        description="No description.",
        stereotype=stereotype,
        methods=(
            MethodFact(name="render", doc="Renders the widget."),
            MethodFact(name="reset", doc=""),
        ),
        dependencies=tuple(dependencies),
    )


def test_prompt_matches_expected_layout() -> None:
    prompt = PromptBuilder().build(_document())

    assert prompt == (
        "Generate documentation in Markdown format for the following Java class.\n"
        "Class: Widget\n"
        "Type: Service\n"
        "Description: No description.\n"
        "Methods:\n"
        "- render(): Renders the widget.\n"
        "- reset(): \n"
        "\n"
        "Dependencies (tree):\n"
        "- Logger\n"
        "\n"
        "Draw a dependency tree showing how this class depends on these objects.\n"
        "\n"
        "This is a Service class. Document its business logic, main responsibilities, "
        "and how it interacts with other layers."
        "\n"
        "Include diagrams and summary overview where appropriate."
    )


def test_prompt_omits_dependency_block_without_dependencies() -> None:
    prompt = PromptBuilder().build(_document(dependencies=()))

    assert PROMPT_DEP_TREE not in prompt
    assert "Draw a dependency tree" not in prompt
    assert prompt.index("- render(): Renders the widget.") < prompt.index("- reset(): ")


def test_prompt_suffix_follows_stereotype() -> None:
    builder = PromptBuilder()

    assert PROMPT_REPOSITORY in builder.build(_document(Stereotype.REPOSITORY))
    assert PROMPT_SERVICE in builder.build(_document(Stereotype.SERVICE))
    assert PROMPT_REST_CONTROLLER in builder.build(_document(Stereotype.REST_CONTROLLER))
    assert PROMPT_REST_CONTROLLER in builder.build(_document(Stereotype.CONTROLLER))
    assert PROMPT_GENERIC in builder.build(_document(Stereotype.GENERIC))
    assert PROMPT_GENERIC not in builder.build(_document(Stereotype.SERVICE))


def test_prompt_is_deterministic() -> None:
    builder = PromptBuilder()

    assert builder.build(_document()) == builder.build(_document())
