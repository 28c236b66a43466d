"""Mermaid package diagrams built from a package registry snapshot."""

from __future__ import annotations

from typing import List, Mapping, Sequence

from jinja2 import Environment

from .registry import DEFAULT_PACKAGE
from .templates import create_environment

DEFAULT_NODE = "default"
DEFAULT_TITLE = "(default)"


def node_id(package: str) -> str:
    """Return a mermaid-safe node identifier for a package path."""
    if package == DEFAULT_PACKAGE:
        return DEFAULT_NODE
    return package.replace(".", "_")


def immediate_subpackages(packages: Sequence[str], package: str) -> List[str]:
    """Return the registered packages exactly one level below ``package``."""
    prefix = f"{package}." if package != DEFAULT_PACKAGE else ""
    children: List[str] = []
    for candidate in packages:
        if candidate == package or not candidate.startswith(prefix):
            continue
        remainder = candidate[len(prefix) :]
        if remainder and "." not in remainder and candidate not in children:
            children.append(candidate)
    return children


class DiagramBuilder:
    """Renders per-package summaries and the project-wide package diagram."""

    def __init__(self, env: Environment | None = None) -> None:
        self._env = env or create_environment()

    def package_graph(self, snapshot: Mapping[str, Sequence[str]], package: str) -> str:
        source = node_id(package)
        lines = ["graph TD"]
        for type_name in snapshot.get(package, ()):
            lines.append(f"    {source} --> {type_name}")
        for subpackage in immediate_subpackages(list(snapshot), package):
            lines.append(f"    {source} --> {node_id(subpackage)}")
        return "\n".join(lines)

    def project_graph(self, snapshot: Mapping[str, Sequence[str]]) -> str:
        packages = list(snapshot)
        lines = ["graph TD"]
        for package in packages:
            source = node_id(package)
            for subpackage in immediate_subpackages(packages, package):
                lines.append(f"    {source} --> {node_id(subpackage)}")
            for type_name in snapshot[package]:
                lines.append(f"    {source} --> {type_name}")
        return "\n".join(lines)

    def render_package_summary(self, snapshot: Mapping[str, Sequence[str]], package: str) -> str:
        template = self._env.get_template("package_summary.md.j2")
        return template.render(
            title=package or DEFAULT_TITLE,
            types=list(snapshot.get(package, ())),
            subpackages=immediate_subpackages(list(snapshot), package),
            diagram=self.package_graph(snapshot, package),
        )

    def render_project_diagram(self, snapshot: Mapping[str, Sequence[str]]) -> str:
        template = self._env.get_template("project_diagram.md.j2")
        return template.render(diagram=self.project_graph(snapshot))


__all__ = [
    "DEFAULT_NODE",
    "DEFAULT_TITLE",
    "DiagramBuilder",
    "immediate_subpackages",
    "node_id",
]
