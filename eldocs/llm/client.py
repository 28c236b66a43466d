"""Adapter around an OpenAI-compatible chat completions endpoint."""

from __future__ import annotations

import json
from dataclasses import dataclass
from http.client import HTTPException
from typing import Callable, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..config import DEFAULT_MODEL
from ..failsafe import CONFIG_MISSING, INVALID_RESPONSE, NO_CONTENT, TRANSPORT_ERROR
from ..logging import get_logger
from ..prompting.constants import SYSTEM_PROMPT


class EnrichmentTransportError(RuntimeError):
    """Raised by a transport when the service cannot be reached or rejects the request."""


@dataclass
class EnrichmentRequest:
    """Represents one call to the enrichment service."""

    prompt: str
    model: str
    endpoint: str
    api_key: Optional[str]
    request_timeout: Optional[float]

    def payload(self) -> dict[str, object]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": self.prompt},
            ],
        }


@dataclass(frozen=True)
class EnrichmentResult:
    """Either the enriched text or a failure kind with a diagnostic detail."""

    text: Optional[str] = None
    failure: Optional[str] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, text: str) -> "EnrichmentResult":
        return cls(text=text)

    @classmethod
    def failed(cls, failure: str, detail: str = "") -> "EnrichmentResult":
        return cls(failure=failure, detail=detail)


class EnrichmentClient:
    """Sends prompts to the enrichment service.

    Every call is a single attempt: there is no retry and no caching. Failures come back
    as ``EnrichmentResult`` values instead of exceptions so a batch run can continue.
    In debug mode the request is logged and the prompt itself is returned.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        *,
        request_timeout: Optional[float] = 60.0,
        debug: bool = False,
        transport: Callable[[EnrichmentRequest], str] | None = None,
    ) -> None:
        self.model = model
        self.request_timeout = request_timeout
        self.debug = debug
        self._transport = transport or self._http_transport
        self.logger = get_logger("llm")

    def enrich(self, prompt: str, endpoint: Optional[str], api_key: Optional[str]) -> EnrichmentResult:
        """Send the prompt and return the generated text or a failure value."""
        request = EnrichmentRequest(
            prompt=prompt,
            model=self.model,
            endpoint=endpoint or "",
            api_key=api_key,
            request_timeout=self.request_timeout,
        )
        if self.debug:
            self.logger.debug("Request body: %s", json.dumps(request.payload(), indent=2))
            return EnrichmentResult.success(prompt)
        if not endpoint or api_key is None:
            return EnrichmentResult.failed(CONFIG_MISSING, "endpoint or api_key is not configured")

        try:
            raw = self._transport(request)
        except EnrichmentTransportError as exc:
            return EnrichmentResult.failed(TRANSPORT_ERROR, str(exc))

        try:
            response_payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            return EnrichmentResult.failed(INVALID_RESPONSE, f"response is not JSON: {exc}")
        if not isinstance(response_payload, dict):
            return EnrichmentResult.failed(INVALID_RESPONSE, "response is not a JSON object")

        content = self._extract_content(response_payload)
        if not content:
            return EnrichmentResult.failed(NO_CONTENT, "response has no content field")
        return EnrichmentResult.success(content.strip())

    @staticmethod
    def _http_transport(request: EnrichmentRequest) -> str:
        data = json.dumps(request.payload()).encode("utf-8")
        headers = {"Content-Type": "application/json"}
        if request.api_key:
            headers["Authorization"] = f"Bearer {request.api_key}"

        timeout = request.request_timeout or 60.0

        try:
            http_request = Request(request.endpoint, data=data, headers=headers, method="POST")
            with urlopen(http_request, timeout=timeout) as response:  # type: ignore[arg-type]
                raw = response.read()
        except HTTPError as exc:
            detail = exc.read().decode("utf-8", errors="ignore") if hasattr(exc, "read") else ""
            message = detail.strip() or exc.reason
            raise EnrichmentTransportError(
                f"Enrichment service failed with status {exc.code}: {message}"
            ) from exc
        except URLError as exc:
            raise EnrichmentTransportError(f"Enrichment service unreachable: {exc.reason}") from exc
        except (OSError, ValueError, HTTPException) as exc:
            raise EnrichmentTransportError(f"Enrichment request failed: {exc}") from exc
        return raw.decode("utf-8", errors="replace")

    @staticmethod
    def _extract_content(payload: dict[str, object]) -> str:
        choices = payload.get("choices")
        if isinstance(choices, list) and choices:
            first = choices[0]
            if isinstance(first, dict):
                message = first.get("message")
                if isinstance(message, dict):
                    content = message.get("content")
                    if isinstance(content, str):
                        return content
                text = first.get("text")
                if isinstance(text, str):
                    return text
        content = payload.get("content")
        if isinstance(content, str):
            return content
        return ""


__all__ = [
    "EnrichmentClient",
    "EnrichmentRequest",
    "EnrichmentResult",
    "EnrichmentTransportError",
]
