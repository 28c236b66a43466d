"""Tests for the tree-sitter Java source parser."""

from __future__ import annotations

from pathlib import Path

import pytest

from eldocs.analyzers.base import SourceParseError
from eldocs.analyzers.java import DEFAULT_DESCRIPTION, JavaSourceParser
from eldocs.models import FieldFact, MethodFact, ParameterFact

WIDGET_SOURCE = b"""
package com.example;

import org.slf4j.Logger;

@Service
public class Widget {
    @Autowired
    private Renderer renderer;
    private int count;
    private final List<String> names;

    public Widget(Logger logger, int size) {
        this.names = null;
    }

    public Widget(Clock clock) {
        this.names = null;
    }

    /**
     * Renders the widget.
     */
    public void render() {
    }

    public int size() {
        return count;
    }
}
"""


@pytest.fixture(scope="module")
def parser() -> JavaSourceParser:
    return JavaSourceParser()


def test_parser_extracts_primary_type_facts(parser: JavaSourceParser) -> None:
    unit = parser.parse_source(WIDGET_SOURCE, path="Widget.java")

    assert unit is not None
    assert unit.package == "com.example"
    assert unit.name == "Widget"
    assert unit.doc == DEFAULT_DESCRIPTION
    assert unit.annotations == ("Service",)
    assert unit.methods == (
        MethodFact(name="render", doc="Renders the widget."),
        MethodFact(name="size", doc=""),
    )
    assert unit.fields == (
        FieldFact(type_name="Renderer", annotations=("Autowired",)),
        FieldFact(type_name="int", annotations=()),
        FieldFact(type_name="List<String>", annotations=()),
    )
    assert [param.type_name for param in unit.constructor_parameters] == ["Logger", "int", "Clock"]
    assert unit.constructor_parameters[0] == ParameterFact(type_name="Logger", name="logger")
    assert unit.path == "Widget.java"


def test_parser_reads_class_doc_comment_and_qualified_annotations(parser: JavaSourceParser) -> None:
    source = b"""
package com.example.data;

/**
 * Stores users.
 *
 * Backed by JPA.
 */
@org.springframework.stereotype.Repository
public interface UserRepository extends JpaRepository<User, Long> {
    /** Finds active users. */
    List<User> findActive();
}
"""
    unit = parser.parse_source(source)

    assert unit is not None
    assert unit.name == "UserRepository"
    assert unit.doc == "Stores users.\n\nBacked by JPA."
    assert unit.annotations == ("Repository",)
    assert unit.methods == (MethodFact(name="findActive", doc="Finds active users."),)


def test_parser_defaults_to_empty_package(parser: JavaSourceParser) -> None:
    unit = parser.parse_source(b"public class Main { public static void main(String[] args) {} }")

    assert unit is not None
    assert unit.package == ""
    assert unit.methods == (MethodFact(name="main", doc=""),)


def test_parser_returns_none_without_class_or_interface(parser: JavaSourceParser) -> None:
    assert parser.parse_source(b"package com.example;\n\npublic enum Color { RED, GREEN }\n") is None


def test_parser_uses_first_declared_type(parser: JavaSourceParser) -> None:
    source = b"""
class First {
    class Inner {}
}

class Second {}
"""
    unit = parser.parse_source(source)

    assert unit is not None
    assert unit.name == "First"


def test_parser_reports_syntax_errors(parser: JavaSourceParser) -> None:
    with pytest.raises(SourceParseError) as excinfo:
        parser.parse_source(b"public class {\n  void broken( {\n}\n", path="Broken.java")

    assert excinfo.value.path == "Broken.java"
    assert "Broken.java" in str(excinfo.value)


def test_parser_reads_files_from_disk(parser: JavaSourceParser, tmp_path: Path) -> None:
    path = tmp_path / "Widget.java"
    path.write_bytes(WIDGET_SOURCE)

    assert parser.supports(path)
    unit = parser.parse(path)

    assert unit is not None
    assert unit.path == str(path)
