"""Tests for local and delegated document rendering."""

from __future__ import annotations

from pathlib import Path

from eldocs.config import LLMConfig
from eldocs.failsafe import CONFIG_MISSING, NO_CONTENT, TRANSPORT_ERROR, error_marker
from eldocs.llm.client import EnrichmentClient, EnrichmentResult
from eldocs.models import MethodFact, Stereotype, TypeDocument
from eldocs.renderer import DocumentRenderer
from eldocs.templates import create_environment

EXPECTED_WIDGET_PAGE = (
    "---\n"
    "id: Widget\n"
    "title: Widget\n"
    "sidebar_label: Widget\n"
    "---\n"
    "\n"
    "# Widget\n"
    "\n"
    "**Type:** Service\n"
    "\n"
    "## Description\n"
    "No description.\n"
    "\n"
    "## Methods\n"
    "- render(): Renders the widget.\n"
    "\n"
    "## Dependencies\n"
    "- Logger\n"
    "\n"
    "---\n"
)


class RecordingClient:
    """Client double that records prompts and replays a canned result."""

    def __init__(self, result: EnrichmentResult) -> None:
        self.result = result
        self.calls: list[tuple[str, str | None, str | None]] = []

    def enrich(self, prompt: str, endpoint: str | None, api_key: str | None) -> EnrichmentResult:
        self.calls.append((prompt, endpoint, api_key))
        return self.result


def _document(dependencies=("Logger",)) -> TypeDocument:  # type: ignore[no-untyped-def]
    return TypeDocument(
        name="Widget",
        package="com.example",
        description="No description.",
        stereotype=Stereotype.SERVICE,
        methods=(MethodFact(name="render", doc="Renders the widget."),),
        dependencies=tuple(dependencies),
    )


def test_local_rendering_produces_fixed_sections() -> None:
    page = DocumentRenderer().render(_document(), use_ai=False)

    assert page == EXPECTED_WIDGET_PAGE


def test_local_rendering_omits_empty_dependencies() -> None:
    page = DocumentRenderer().render_local(_document(dependencies=()))

    assert "## Dependencies" not in page
    assert page.endswith("## Methods\n- render(): Renders the widget.\n\n---\n")


def test_local_rendering_is_pure() -> None:
    renderer = DocumentRenderer()

    assert renderer.render_local(_document()) == renderer.render_local(_document())


def test_local_rendering_honours_template_override(tmp_path: Path) -> None:
    (tmp_path / "type.md.j2").write_text("{{ name }} is a {{ stereotype }}\n", encoding="utf-8")
    renderer = DocumentRenderer(env=create_environment(tmp_path))

    assert renderer.render_local(_document()) == "Widget is a Service\n"


def test_delegated_rendering_returns_client_text_verbatim() -> None:
    client = RecordingClient(EnrichmentResult.success("# Widget\n\nEnriched."))
    renderer = DocumentRenderer(client=client)  # type: ignore[arg-type]
    llm = LLMConfig(endpoint="http://localhost:8080/v1/chat/completions", api_key="key")

    page = renderer.render(_document(), use_ai=True, llm=llm)

    assert page == "# Widget\n\nEnriched."
    prompt, endpoint, api_key = client.calls[0]
    assert prompt == renderer.prompt_builder.build(_document())
    assert endpoint == "http://localhost:8080/v1/chat/completions"
    assert api_key == "key"


def test_delegated_rendering_emits_marker_on_failure() -> None:
    for failure in (TRANSPORT_ERROR, NO_CONTENT, CONFIG_MISSING):
        client = RecordingClient(EnrichmentResult.failed(failure, "boom"))
        renderer = DocumentRenderer(client=client)  # type: ignore[arg-type]

        page = renderer.render(_document(), use_ai=True, llm=LLMConfig(api_key="key"))

        assert page == error_marker(failure)


def test_delegated_rendering_in_debug_mode_returns_prompt() -> None:
    renderer = DocumentRenderer(client=EnrichmentClient(debug=True))

    page = renderer.render(_document(), use_ai=True, llm=LLMConfig(debug=True))

    assert page == renderer.prompt_builder.build(_document())
