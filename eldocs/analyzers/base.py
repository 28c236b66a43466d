"""Base classes for source parsers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence

from ..models import SourceUnit


class SourceParseError(RuntimeError):
    """Raised when a source file cannot be parsed into a syntax tree."""

    def __init__(self, path: str, problems: Sequence[str]) -> None:
        self.path = path
        self.problems = list(problems)
        detail = "; ".join(self.problems) if self.problems else "unknown syntax error"
        super().__init__(f"Failed to parse {path}: {detail}")


class SourceParser(ABC):
    """Contract for parsers that turn one source file into a structural record."""

    suffixes: Sequence[str] = ()

    def supports(self, path: Path) -> bool:
        """Return True when this parser handles the given file."""
        return path.suffix.lower() in self.suffixes

    @abstractmethod
    def parse(self, path: Path) -> Optional[SourceUnit]:
        """Return the primary type of the file, or None when it declares no class or interface."""
