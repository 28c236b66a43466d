"""Static dependency discovery from injected fields and constructor parameters."""

from __future__ import annotations

import re
from typing import Dict, Iterable, Optional, Sequence, Tuple

from ..models import SourceUnit

_PRIMITIVE_TYPES = {
    "boolean",
    "byte",
    "char",
    "short",
    "int",
    "long",
    "float",
    "double",
    "void",
    "var",
}

_QUALIFIED_NAME = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")


def simple_type_name(declared: str) -> Optional[str]:
    """Return the simple name of a declared type, or None for primitives and arrays.

    Generic arguments are dropped (``Repository<User>`` yields ``Repository``) and qualified
    names are reduced to their last segment.
    """
    text = _strip_type_arguments(declared).strip()
    if not text or "[" in text or text.endswith("..."):
        return None
    text = re.sub(r"@[\w.$]+\s*", "", text).replace(" ", "")
    if not _QUALIFIED_NAME.match(text):
        return None
    name = text.rsplit(".", 1)[-1]
    if name in _PRIMITIVE_TYPES:
        return None
    return name


def _strip_type_arguments(declared: str) -> str:
    result = []
    depth = 0
    for char in declared:
        if char == "<":
            depth += 1
            continue
        if char == ">":
            depth = max(0, depth - 1)
            continue
        if depth == 0:
            result.append(char)
    return "".join(result)


class DependencyExtractor:
    """Collects the distinct type names a unit depends on."""

    def __init__(self, injection_markers: Sequence[str] = ("Autowired",)) -> None:
        self.injection_markers = frozenset(injection_markers)

    def extract(self, unit: SourceUnit) -> Tuple[str, ...]:
        """Return dependencies in first-seen order: injected fields, then constructor parameters."""
        seen: Dict[str, None] = {}
        for field in unit.fields:
            if not self._is_injected(field.annotations):
                continue
            self._add(seen, field.type_name)
        for parameter in unit.constructor_parameters:
            self._add(seen, parameter.type_name)
        return tuple(seen)

    def _is_injected(self, annotations: Iterable[str]) -> bool:
        return any(
            annotation.lstrip("@").rsplit(".", 1)[-1] in self.injection_markers
            for annotation in annotations
        )

    @staticmethod
    def _add(seen: Dict[str, None], declared: str) -> None:
        name = simple_type_name(declared)
        if name is not None:
            seen.setdefault(name, None)


__all__ = ["DependencyExtractor", "simple_type_name"]
