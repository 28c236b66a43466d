"""Core data models shared across eldocs components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


class Stereotype(str, Enum):
    """Architectural role assigned to a documented type."""

    REPOSITORY = "Repository"
    SERVICE = "Service"
    REST_CONTROLLER = "Rest Controller"
    CONTROLLER = "Controller"
    GENERIC = "Generic"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MethodFact:
    """A declared method and its doc comment text."""

    name: str
    doc: str = ""


@dataclass(frozen=True)
class FieldFact:
    """A field declaration: its declared type text and annotation names."""

    type_name: str
    annotations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ParameterFact:
    """A constructor parameter declaration."""

    type_name: str
    name: str = ""


@dataclass(frozen=True)
class SourceUnit:
    """Structural facts for the primary type of one source file."""

    package: str
    name: str
    doc: str
    methods: Tuple[MethodFact, ...] = ()
    annotations: Tuple[str, ...] = ()
    fields: Tuple[FieldFact, ...] = ()
    constructor_parameters: Tuple[ParameterFact, ...] = ()
    path: Optional[str] = None


@dataclass(frozen=True)
class TypeDocument:
    """Everything needed to render the documentation page of one type."""

    name: str
    package: str
    description: str
    stereotype: Stereotype
    methods: Tuple[MethodFact, ...] = ()
    dependencies: Tuple[str, ...] = ()


@dataclass
class RenderedArtifact:
    """Rendered text and the path it belongs at."""

    path: Path
    content: str


__all__ = [
    "FieldFact",
    "MethodFact",
    "ParameterFact",
    "RenderedArtifact",
    "SourceUnit",
    "Stereotype",
    "TypeDocument",
]
