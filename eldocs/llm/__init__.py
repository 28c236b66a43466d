"""Client for the external documentation enrichment service."""

from .client import EnrichmentClient, EnrichmentRequest, EnrichmentResult

__all__ = ["EnrichmentClient", "EnrichmentRequest", "EnrichmentResult"]
