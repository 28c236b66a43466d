"""Persists rendered artifacts under the output root, mirroring package structure."""

from __future__ import annotations

from pathlib import Path

from .config import WRITE_POLICIES
from .models import RenderedArtifact

SUMMARY_STEM = "package-summary"
PROJECT_DIAGRAM_STEM = "project-package-diagram"


def package_directory(output_root: Path, package: str) -> Path:
    """Return the output directory for a package; the default package maps to the root."""
    directory = output_root
    if package:
        for part in package.split("."):
            directory = directory / part
    return directory


class ArtifactWriter:
    """Writes artifacts, creating parent directories as needed.

    With the ``always`` policy every write overwrites the target. With ``changed`` a target
    that already holds identical text is left untouched.
    """

    def __init__(self, output_root: Path, *, extension: str = "md", policy: str = "always") -> None:
        if policy not in WRITE_POLICIES:
            raise ValueError(f"Unknown write policy: {policy}")
        self.output_root = output_root
        self.extension = extension.lstrip(".")
        self.policy = policy

    def type_path(self, package: str, type_name: str) -> Path:
        return package_directory(self.output_root, package) / f"{type_name}.{self.extension}"

    def summary_path(self, package: str) -> Path:
        return package_directory(self.output_root, package) / f"{SUMMARY_STEM}.{self.extension}"

    def project_diagram_path(self) -> Path:
        return self.output_root / f"{PROJECT_DIAGRAM_STEM}.{self.extension}"

    def write(self, artifact: RenderedArtifact) -> bool:
        """Persist the artifact; return False when the ``changed`` policy skipped it."""
        path = artifact.path
        data = artifact.content.encode("utf-8")
        if self.policy == "changed" and path.is_file() and path.read_bytes() == data:
            return False
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return True


__all__ = ["ArtifactWriter", "package_directory"]
