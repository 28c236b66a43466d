"""Annotation-driven stereotype classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..models import Stereotype


@dataclass(frozen=True)
class StereotypeRule:
    """Associates an annotation marker with the stereotype it implies."""

    marker: str
    stereotype: Stereotype

    def matches(self, annotations: Iterable[str]) -> bool:
        return any(_simple_name(annotation) == self.marker for annotation in annotations)


# Evaluated top to bottom; the first matching rule wins.
DEFAULT_RULES: Sequence[StereotypeRule] = (
    StereotypeRule(marker="Repository", stereotype=Stereotype.REPOSITORY),
    StereotypeRule(marker="Service", stereotype=Stereotype.SERVICE),
    StereotypeRule(marker="RestController", stereotype=Stereotype.REST_CONTROLLER),
    StereotypeRule(marker="Controller", stereotype=Stereotype.CONTROLLER),
)


class StereotypeClassifier:
    """Maps a type's annotations to exactly one architectural role."""

    def __init__(self, rules: Sequence[StereotypeRule] = DEFAULT_RULES) -> None:
        self.rules = tuple(rules)

    def classify(self, annotations: Iterable[str]) -> Stereotype:
        names = list(annotations)
        for rule in self.rules:
            if rule.matches(names):
                return rule.stereotype
        return Stereotype.GENERIC


def _simple_name(name: str) -> str:
    return name.lstrip("@").rsplit(".", 1)[-1].strip()


__all__ = ["DEFAULT_RULES", "StereotypeClassifier", "StereotypeRule"]
