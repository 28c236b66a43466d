"""Tests for annotation-driven stereotype classification."""

from __future__ import annotations

from eldocs.analyzers.stereotypes import DEFAULT_RULES, StereotypeClassifier, StereotypeRule
from eldocs.models import Stereotype


def test_classifier_returns_generic_without_matching_annotation() -> None:
    classifier = StereotypeClassifier()

    assert classifier.classify([]) is Stereotype.GENERIC
    assert classifier.classify(["Entity", "Table", "Deprecated"]) is Stereotype.GENERIC


def test_classifier_ignores_non_matching_annotations() -> None:
    classifier = StereotypeClassifier()

    assert classifier.classify(["Transactional", "Service", "Validated"]) is Stereotype.SERVICE
    assert classifier.classify(["RequestMapping", "RestController"]) is Stereotype.REST_CONTROLLER
    assert classifier.classify(["Controller"]) is Stereotype.CONTROLLER
    assert classifier.classify(["Repository"]) is Stereotype.REPOSITORY


def test_classifier_priority_is_independent_of_annotation_order() -> None:
    classifier = StereotypeClassifier()

    assert classifier.classify(["Controller", "Service"]) is Stereotype.SERVICE
    assert classifier.classify(["Service", "Repository"]) is Stereotype.REPOSITORY
    assert classifier.classify(["Controller", "RestController"]) is Stereotype.REST_CONTROLLER


def test_default_rules_follow_documented_priority() -> None:
    assert [rule.marker for rule in DEFAULT_RULES] == [
        "Repository",
        "Service",
        "RestController",
        "Controller",
    ]


def test_classifier_matches_qualified_and_prefixed_names() -> None:
    classifier = StereotypeClassifier()

    assert classifier.classify(["org.springframework.stereotype.Service"]) is Stereotype.SERVICE
    assert classifier.classify(["@RestController"]) is Stereotype.REST_CONTROLLER


def test_classifier_accepts_custom_rule_table() -> None:
    classifier = StereotypeClassifier(
        rules=(
            StereotypeRule(marker="Controller", stereotype=Stereotype.CONTROLLER),
            StereotypeRule(marker="Service", stereotype=Stereotype.SERVICE),
        )
    )

    assert classifier.classify(["Service", "Controller"]) is Stereotype.CONTROLLER
