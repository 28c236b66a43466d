"""Tree-sitter powered Java source model extractor."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional

import tree_sitter_java as tsjava
from tree_sitter import Language, Node, Parser

from .base import SourceParseError, SourceParser
from ..models import FieldFact, MethodFact, ParameterFact, SourceUnit

DEFAULT_DESCRIPTION = "No description."

_TYPE_DECLARATIONS = {"class_declaration", "interface_declaration"}
_ANNOTATION_NODES = {"annotation", "marker_annotation"}
_MAX_REPORTED_PROBLEMS = 5


class JavaSourceParser(SourceParser):
    """Extracts the primary class or interface of a Java compilation unit."""

    suffixes = (".java",)

    def __init__(self) -> None:
        self._parser = Parser(Language(tsjava.language()))

    def parse(self, path: Path) -> Optional[SourceUnit]:
        return self.parse_source(path.read_bytes(), path=str(path))

    def parse_source(self, source_bytes: bytes, *, path: str = "<memory>") -> Optional[SourceUnit]:
        tree = self._parser.parse(source_bytes)
        root = tree.root_node
        if root.has_error:
            raise SourceParseError(path, self._collect_problems(root))

        declaration = self._find_type_declaration(root)
        if declaration is None:
            return None

        name_node = declaration.child_by_field_name("name")
        if name_node is None:
            return None
        doc = self._doc_comment(declaration, source_bytes)
        body = declaration.child_by_field_name("body")
        members = list(body.named_children) if body is not None else []

        return SourceUnit(
            package=self._package_name(root, source_bytes),
            name=self._node_text(name_node, source_bytes),
            doc=DEFAULT_DESCRIPTION if doc is None else doc,
            methods=tuple(self._methods(members, source_bytes)),
            annotations=tuple(self._annotations(declaration, source_bytes)),
            fields=tuple(self._fields(members, source_bytes)),
            constructor_parameters=tuple(self._constructor_parameters(members, source_bytes)),
            path=path,
        )

    @staticmethod
    def _node_text(node: Node, source_bytes: bytes) -> str:
        return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")

    def _collect_problems(self, root: Node) -> List[str]:
        problems: List[str] = []
        for node in self._walk(root):
            if node.type == "ERROR":
                problems.append(f"syntax error at line {node.start_point[0] + 1}")
            elif node.is_missing:
                problems.append(f"missing '{node.type}' at line {node.start_point[0] + 1}")
            if len(problems) >= _MAX_REPORTED_PROBLEMS:
                break
        return problems

    def _walk(self, node: Node) -> Iterator[Node]:
        yield node
        for child in node.children:
            yield from self._walk(child)

    def _find_type_declaration(self, root: Node) -> Optional[Node]:
        for node in self._walk(root):
            if node.type in _TYPE_DECLARATIONS:
                return node
        return None

    def _package_name(self, root: Node, source_bytes: bytes) -> str:
        for child in root.named_children:
            if child.type != "package_declaration":
                continue
            for part in child.named_children:
                if part.type in {"identifier", "scoped_identifier"}:
                    return self._node_text(part, source_bytes)
        return ""

    def _doc_comment(self, node: Node, source_bytes: bytes) -> Optional[str]:
        previous = node.prev_named_sibling
        if previous is None or previous.type != "block_comment":
            return None
        raw = self._node_text(previous, source_bytes)
        if not raw.startswith("/**"):
            return None
        return _clean_doc_comment(raw)

    def _annotations(self, node: Node, source_bytes: bytes) -> List[str]:
        names: List[str] = []
        for child in node.named_children:
            if child.type != "modifiers":
                continue
            for modifier in child.named_children:
                if modifier.type not in _ANNOTATION_NODES:
                    continue
                name_node = modifier.child_by_field_name("name")
                if name_node is not None:
                    names.append(_simple_name(self._node_text(name_node, source_bytes)))
        return names

    def _methods(self, members: List[Node], source_bytes: bytes) -> Iterator[MethodFact]:
        for member in members:
            if member.type != "method_declaration":
                continue
            name_node = member.child_by_field_name("name")
            if name_node is None:
                continue
            doc = self._doc_comment(member, source_bytes)
            yield MethodFact(name=self._node_text(name_node, source_bytes), doc=doc or "")

    def _fields(self, members: List[Node], source_bytes: bytes) -> Iterator[FieldFact]:
        for member in members:
            if member.type != "field_declaration":
                continue
            type_node = member.child_by_field_name("type")
            if type_node is None:
                continue
            yield FieldFact(
                type_name=self._node_text(type_node, source_bytes),
                annotations=tuple(self._annotations(member, source_bytes)),
            )

    def _constructor_parameters(
        self, members: List[Node], source_bytes: bytes
    ) -> Iterator[ParameterFact]:
        for member in members:
            if member.type != "constructor_declaration":
                continue
            parameters = member.child_by_field_name("parameters")
            if parameters is None:
                continue
            for parameter in parameters.named_children:
                if parameter.type == "formal_parameter":
                    type_node = parameter.child_by_field_name("type")
                    name_node = parameter.child_by_field_name("name")
                    if type_node is None:
                        continue
                    yield ParameterFact(
                        type_name=self._node_text(type_node, source_bytes),
                        name=self._node_text(name_node, source_bytes) if name_node else "",
                    )
                elif parameter.type == "spread_parameter":
                    type_node = next(
                        (child for child in parameter.named_children if child.type != "modifiers"),
                        None,
                    )
                    if type_node is not None:
                        yield ParameterFact(type_name=f"{self._node_text(type_node, source_bytes)}...")


def _clean_doc_comment(raw: str) -> str:
    body = raw[3:-2] if raw.endswith("*/") else raw[3:]
    lines: List[str] = []
    for line in body.splitlines():
        stripped = line.strip()
        if stripped.startswith("*"):
            stripped = stripped[1:].strip()
        lines.append(stripped)
    return "\n".join(lines).strip()


def _simple_name(name: str) -> str:
    return name.rsplit(".", 1)[-1].strip()


__all__ = ["DEFAULT_DESCRIPTION", "JavaSourceParser"]
