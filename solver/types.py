"""
solver/types.py — podstawowe typy danych silnika wnioskowania.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from propositions import Expression


class Verdict(StrEnum):
    """Wynik przeszukiwania."""
    DERIVED      = "derived"
    NOT_DERIVED  = "not_derived"
    INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True, slots=True)
class SearchLimits:
    """
    Limity saturacji — po przekroczeniu wynik to INCONCLUSIVE.

    - max_facts:   maks. liczba faktów na liście roboczej (przesłanki + pochodne)
    - max_steps:   maks. liczba rozpatrzonych par faktów
    - max_seconds: limit czasu zegarowego (None = bez limitu)
    """
    max_facts:   int = 2000
    max_steps:   int = 200_000
    max_seconds: float | None = None


@dataclass(frozen=True, slots=True)
class Derivation:
    """Fakt pochodny: rule(left, right) → fact."""
    fact:  Expression
    rule:  str
    left:  Expression
    right: Expression

    def __str__(self) -> str:
        return f"{self.fact}  [{self.rule}: {self.left}, {self.right}]"


@dataclass(slots=True)
class SearchResult:
    """
    Wynik jednego przebiegu saturacji.

    - verdict:     DERIVED / NOT_DERIVED / INCONCLUSIVE
    - facts:       końcowa lista robocza (przesłanki + fakty pochodne)
    - derivations: fakty pochodne w kolejności odkrycia
    - steps:       liczba rozpatrzonych par
    - elapsed:     czas przeszukiwania w sekundach
    """
    verdict:     Verdict
    facts:       list[Expression] = field(default_factory=list)
    derivations: list[Derivation] = field(default_factory=list)
    steps:       int = 0
    elapsed:     float = 0.0

    @property
    def derived(self) -> bool:
        return self.verdict == Verdict.DERIVED


class SearchExhaustedError(RuntimeError):
    """Saturacja przerwana przez limit — nie wiadomo, czy wniosek wynika."""

    def __init__(self, result: SearchResult) -> None:
        super().__init__(
            f"Przeszukiwanie przerwane po {result.steps} parach "
            f"({len(result.facts)} faktów, {result.elapsed:.2f}s) — wynik nierozstrzygnięty."
        )
        self.result = result
