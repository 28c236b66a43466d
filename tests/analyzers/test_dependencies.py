"""Tests for static dependency extraction."""

from __future__ import annotations

from eldocs.analyzers.dependencies import DependencyExtractor, simple_type_name
from eldocs.models import FieldFact, ParameterFact, SourceUnit


def _unit(fields=(), parameters=()) -> SourceUnit:  # type: ignore[no-untyped-def]
    return SourceUnit(
        package="com.example",
        name="OrderService",
        doc="No description.",
        fields=tuple(fields),
        constructor_parameters=tuple(parameters),
    )


def test_simple_type_name_filters_primitives_and_arrays() -> None:
    assert simple_type_name("Logger") == "Logger"
    assert simple_type_name("org.slf4j.Logger") == "Logger"
    assert simple_type_name("Repository<User, Long>") == "Repository"
    assert simple_type_name("Map<String, List<Order>>") == "Map"
    assert simple_type_name("@NonNull Clock") == "Clock"
    assert simple_type_name("int") is None
    assert simple_type_name("boolean") is None
    assert simple_type_name("Order[]") is None
    assert simple_type_name("String...") is None
    assert simple_type_name("") is None


def test_extractor_only_uses_injected_fields() -> None:
    unit = _unit(
        fields=[
            FieldFact(type_name="OrderRepository", annotations=("Autowired",)),
            FieldFact(type_name="Clock", annotations=()),
            FieldFact(type_name="int", annotations=("Autowired",)),
        ]
    )

    assert DependencyExtractor().extract(unit) == ("OrderRepository",)


def test_extractor_unions_all_constructor_parameters() -> None:
    unit = _unit(
        fields=[FieldFact(type_name="Mailer", annotations=("Autowired",))],
        parameters=[
            ParameterFact(type_name="Logger"),
            ParameterFact(type_name="long"),
            ParameterFact(type_name="Mailer"),
            ParameterFact(type_name="Clock"),
        ],
    )

    assert DependencyExtractor().extract(unit) == ("Mailer", "Logger", "Clock")


def test_extractor_output_is_stable_across_runs() -> None:
    unit = _unit(
        fields=[
            FieldFact(type_name="B", annotations=("Lazy", "Autowired")),
            FieldFact(type_name="A", annotations=("Autowired", "Lazy")),
        ],
        parameters=[ParameterFact(type_name="C")],
    )
    extractor = DependencyExtractor()

    assert extractor.extract(unit) == extractor.extract(unit) == ("B", "A", "C")


def test_extractor_returns_empty_tuple_without_dependencies() -> None:
    assert DependencyExtractor().extract(_unit()) == ()


def test_extractor_honours_custom_injection_markers() -> None:
    unit = _unit(fields=[FieldFact(type_name="Gateway", annotations=("javax.inject.Inject",))])

    assert DependencyExtractor().extract(unit) == ()
    assert DependencyExtractor(["Inject"]).extract(unit) == ("Gateway",)
