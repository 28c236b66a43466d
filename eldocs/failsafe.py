"""Deterministic fallback text emitted when delegated rendering fails."""

from __future__ import annotations

from typing import Dict

CONFIG_MISSING = "config_missing"
TRANSPORT_ERROR = "transport_error"
INVALID_RESPONSE = "invalid_response"
NO_CONTENT = "no_content"

_MARKERS: Dict[str, str] = {
    CONFIG_MISSING: "[ERROR] API config missing.",
    TRANSPORT_ERROR: "[ERROR] Enrichment request failed.",
    INVALID_RESPONSE: "[ERROR] Invalid response from enrichment service.",
    NO_CONTENT: "[ERROR] No content returned.",
}


def error_marker(kind: str) -> str:
    """Return the inline marker that replaces an artifact body for a failure kind."""
    return _MARKERS.get(kind, _MARKERS[TRANSPORT_ERROR])


__all__ = [
    "CONFIG_MISSING",
    "INVALID_RESPONSE",
    "NO_CONTENT",
    "TRANSPORT_ERROR",
    "error_marker",
]
