"""Source parsing and classification for documented types."""

from __future__ import annotations

from .base import SourceParseError, SourceParser
from .dependencies import DependencyExtractor, simple_type_name
from .stereotypes import DEFAULT_RULES, StereotypeClassifier, StereotypeRule

__all__ = [
    "DEFAULT_RULES",
    "DependencyExtractor",
    "SourceParseError",
    "SourceParser",
    "StereotypeClassifier",
    "StereotypeRule",
    "simple_type_name",
]
