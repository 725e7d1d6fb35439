"""
solver/engine.py — silnik wnioskowania: saturacja w przód (forward chaining).

Algorytm:
  - lista robocza = kopia przesłanek (bez duplikatów wartościowych)
  - kursor frontu przesuwa się po liście roboczej; fakt pod kursorem jest
    parowany z każdym wcześniejszym faktem, a każda reguła stosowana
    w obu kolejnościach argumentów
  - nowe wyniki (nieznane wartościowo) trafiają na koniec listy, czyli
    do frontu — każda para różnych faktów jest rozpatrzona dokładnie raz
  - pierwszy wynik równy wnioskowi kończy przeszukiwanie (DERIVED)
  - liczą się tylko nowe wyniki: wniosek, który jest jedynie przesłanką,
    nie zostanie ponownie wyprowadzony (deduplikacja), więc daje NOT_DERIVED
  - pusty front → NOT_DERIVED; przekroczony limit → INCONCLUSIVE

Procedura jest poprawna, ale niezupełna: bez koniunkcji nie znajdzie
wyprowadzeń, które jej wymagają. Kończy się, bo deduplikacja ogranicza
liczbę faktów do skończonej przestrzeni podwyrażeń; limity SearchLimits
chronią przed wejściami, dla których ta przestrzeń jest duża.
"""

from __future__ import annotations

import time
from typing import Sequence

from propositions import Expression

from .rules import RULES, InferenceRule
from .types import Derivation, SearchLimits, SearchResult, Verdict


class InferenceEngine:
    """
    Saturacja reguł wnioskowania nad zbiorem przesłanek.

    Użycie::

        engine = InferenceEngine(premises)
        result = engine.search(conclusion)
        if result.derived:
            ...
    """

    def __init__(
        self,
        premises: Sequence[Expression],
        rules:    Sequence[InferenceRule] | None = None,
        limits:   SearchLimits | None = None,
    ) -> None:
        self._premises: tuple[Expression, ...]    = tuple(premises)
        self._rules:    tuple[InferenceRule, ...] = tuple(RULES if rules is None else rules)
        self._limits:   SearchLimits              = limits or SearchLimits()

    # ------------------------------------------------------------------

    def search(self, conclusion: Expression) -> SearchResult:
        """
        Sprawdza, czy conclusion da się wyprowadzić z przesłanek.

        Każde wywołanie pracuje na własnej liście roboczej — przesłanki
        silnika nie są modyfikowane.
        """
        started = time.monotonic()

        facts: list[Expression] = []
        known: set[Expression]  = set()
        for premise in self._premises:
            if premise not in known:
                known.add(premise)
                facts.append(premise)

        result = SearchResult(verdict=Verdict.NOT_DERIVED, facts=facts)

        cursor = 1
        while cursor < len(facts):
            newcomer = facts[cursor]
            for earlier in facts[:cursor]:
                if self._limit_reached(result, started):
                    return self._finish(result, Verdict.INCONCLUSIVE, started)
                result.steps += 1

                for rule in self._rules:
                    for left, right in ((newcomer, earlier), (earlier, newcomer)):
                        fact = rule.apply(left, right)
                        if fact is None or fact in known:
                            continue
                        known.add(fact)
                        facts.append(fact)
                        result.derivations.append(Derivation(fact, rule.name, left, right))
                        if fact == conclusion:
                            return self._finish(result, Verdict.DERIVED, started)
            cursor += 1

        return self._finish(result, Verdict.NOT_DERIVED, started)

    # ------------------------------------------------------------------

    def _limit_reached(self, result: SearchResult, started: float) -> bool:
        limits = self._limits
        if result.steps >= limits.max_steps:
            return True
        if len(result.facts) >= limits.max_facts:
            return True
        if limits.max_seconds is not None:
            return time.monotonic() - started > limits.max_seconds
        return False

    @staticmethod
    def _finish(result: SearchResult, verdict: Verdict, started: float) -> SearchResult:
        result.verdict = verdict
        result.elapsed = time.monotonic() - started
        return result
