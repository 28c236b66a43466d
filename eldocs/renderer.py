"""Renders one type's documentation page locally or through the enrichment service."""

from __future__ import annotations

from jinja2 import Environment

from .config import LLMConfig
from .failsafe import error_marker
from .llm.client import EnrichmentClient
from .logging import get_logger
from .models import TypeDocument
from .prompting.builder import PromptBuilder
from .templates import create_environment


class DocumentRenderer:
    """Produces the artifact body for a type in local or delegated mode."""

    def __init__(
        self,
        env: Environment | None = None,
        prompt_builder: PromptBuilder | None = None,
        client: EnrichmentClient | None = None,
    ) -> None:
        self._env = env or create_environment()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.client = client
        self.logger = get_logger("renderer")

    def render(self, document: TypeDocument, *, use_ai: bool, llm: LLMConfig | None = None) -> str:
        if use_ai:
            return self.render_delegated(document, llm or LLMConfig())
        return self.render_local(document)

    def render_local(self, document: TypeDocument) -> str:
        template = self._env.get_template("type.md.j2")
        return template.render(
            name=document.name,
            stereotype=document.stereotype.value,
            description=document.description,
            methods=list(document.methods),
            dependencies=list(document.dependencies),
        )

    def render_delegated(self, document: TypeDocument, llm: LLMConfig) -> str:
        client = self.client or EnrichmentClient(
            llm.model, request_timeout=llm.request_timeout, debug=llm.debug
        )
        prompt = self.prompt_builder.build(document)
        result = client.enrich(prompt, llm.endpoint, llm.api_key)
        if result.ok and result.text is not None:
            return result.text
        self.logger.warning(
            "Enrichment failed for %s (%s): %s", document.name, result.failure, result.detail
        )
        return error_marker(result.failure or "")


__all__ = ["DocumentRenderer"]
