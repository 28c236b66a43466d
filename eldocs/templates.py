"""Jinja2 environment shared by the local renderers."""

from __future__ import annotations

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, StrictUndefined

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Build an environment that searches an optional override directory before the defaults."""
    search_path: List[str] = [str(DEFAULT_TEMPLATES_DIR)]
    if templates_dir and Path(templates_dir) != DEFAULT_TEMPLATES_DIR:
        search_path.insert(0, str(templates_dir))
    return Environment(
        loader=FileSystemLoader(search_path),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


__all__ = ["DEFAULT_TEMPLATES_DIR", "create_environment"]
