"""Changed-file detection for incremental documentation runs."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, List


class ChangeDetector:
    """Lists files changed between a base revision and HEAD, relative to a directory."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner

    def changed_files(self, directory: Path, diff_base: str = "HEAD~1") -> List[str]:
        """Return changed paths relative to ``directory``.

        Raises ``RuntimeError`` when git cannot produce the list.
        """
        if not directory.is_dir():
            raise FileNotFoundError(f"Source directory not found: {directory}")
        args = ["git", "diff", "--relative", "--name-only", diff_base, "HEAD"]
        try:
            output = self._run(args, cwd=directory)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise RuntimeError(f"Unable to list changed files against {diff_base}: {exc}") from exc
        files: List[str] = []
        for line in output.splitlines():
            stripped = line.strip()
            if stripped and stripped not in files:
                files.append(stripped)
        return files

    def _run(self, args: Iterable[str], *, cwd: Path) -> str:
        return self._runner(args, cwd=cwd)

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout


__all__ = ["ChangeDetector"]
