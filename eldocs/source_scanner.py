"""Source tree enumeration for documentation runs."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".gradle",
    ".idea",
    ".mvn",
    "build",
    "target",
    "out",
    "node_modules",
}


def matches_exclude(rel_path: str, patterns: Sequence[str]) -> bool:
    """Return True when a relative POSIX path matches any exclude pattern.

    A trailing ``/`` marks a directory prefix; anything else is a glob matched against the
    whole path and against the file name.
    """
    name = rel_path.rsplit("/", 1)[-1]
    for pattern in patterns:
        if not pattern:
            continue
        if pattern.endswith("/"):
            prefix = pattern.lstrip("/")
            if rel_path.startswith(prefix) or f"/{prefix}" in f"/{rel_path}":
                return True
            continue
        if fnmatchcase(rel_path, pattern) or fnmatchcase(name, pattern):
            return True
    return False


class SourceScanner:
    """Walks a source root and returns the files a parser should process."""

    def __init__(self, suffixes: Sequence[str] = (".java",), exclude_paths: Sequence[str] = ()) -> None:
        self.suffixes = tuple(suffix.lower() for suffix in suffixes)
        self.exclude_paths = list(exclude_paths)

    def scan(self, root: Path) -> List[Path]:
        """Return matching files sorted by relative path."""
        root_path = root.expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Source directory not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Source path is not a directory: {root}")
        files = list(self._iter_files(root_path))
        return sorted(files, key=lambda path: path.relative_to(root_path).as_posix())

    def filter(self, root: Path, candidates: Sequence[str]) -> List[Path]:
        """Keep relative candidates that exist, carry a handled suffix and are not excluded."""
        root_path = root.expanduser().resolve()
        selected: List[Path] = []
        for candidate in sorted(set(candidates)):
            rel_path = candidate.replace("\\", "/")
            if not rel_path.lower().endswith(self.suffixes):
                continue
            if matches_exclude(rel_path, self.exclude_paths):
                continue
            path = root_path / rel_path
            if path.is_file():
                selected.append(path)
        return selected

    def _iter_files(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

            dirnames[:] = [
                name
                for name in dirnames
                if name not in _EXCLUDED_DIRS
                and not matches_exclude(f"{rel_dir}/{name}/" if rel_dir else f"{name}/", self.exclude_paths)
            ]

            for filename in filenames:
                if not filename.lower().endswith(self.suffixes):
                    continue
                rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
                if matches_exclude(rel_path, self.exclude_paths):
                    continue
                yield current_dir / filename


__all__ = ["SourceScanner", "matches_exclude"]
