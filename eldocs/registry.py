"""Run-scoped record of which types were documented in which package."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

DEFAULT_PACKAGE = ""


class PackageRegistry:
    """Maps package paths to type names in processing order.

    A registry belongs to exactly one pipeline run. Registration never deduplicates, so
    registering the same unit twice lists it twice.
    """

    def __init__(self) -> None:
        self._packages: Dict[str, List[str]] = {}

    def register(self, package: str, type_name: str) -> None:
        self._packages.setdefault(package or DEFAULT_PACKAGE, []).append(type_name)

    def snapshot(self) -> Mapping[str, Tuple[str, ...]]:
        """Return an immutable view of the packages registered so far."""
        return MappingProxyType({package: tuple(names) for package, names in self._packages.items()})

    def __len__(self) -> int:
        return len(self._packages)

    def __contains__(self, package: object) -> bool:
        return package in self._packages


__all__ = ["DEFAULT_PACKAGE", "PackageRegistry"]
