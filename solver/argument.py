"""
solver/argument.py — rozumowanie: przesłanki + wniosek.

Publiczne API:
  Argument.parse(text, strict)    → Argument
  Argument.search(limits, rules)  → SearchResult
  Argument.check(limits, rules)   → bool
  collect_variables(expression)   → dict[symbol, tekst]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from grammar import parse_sentence
from propositions import Expression

from .engine import InferenceEngine
from .rules import InferenceRule
from .types import SearchExhaustedError, SearchLimits, SearchResult, Verdict


class EmptyArgumentError(ValueError):
    """Brak niepustych linii — nie ma z czego wziąć wniosku."""


def collect_variables(expression: Expression) -> dict[str, str]:
    """Zmienne zdaniowe wyrażenia: symbol → tekst (ostatni zapis wygrywa)."""
    return {atom.symbol: atom.text for atom in expression.atoms()}


@dataclass(frozen=True, slots=True)
class Argument:
    """
    Rozumowanie zbudowane raz z wejścia.

    - premises:   przesłanki w kolejności wejścia
    - conclusion: wniosek (ostatnia linia)
    - variables:  tabela zmiennych wyliczona z przesłanek (kopia, tylko odczyt)
    """
    premises:   tuple[Expression, ...]
    conclusion: Expression
    _variables: dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "premises", tuple(self.premises))
        variables: dict[str, str] = {}
        for premise in self.premises:
            variables.update(collect_variables(premise))
        object.__setattr__(self, "_variables", variables)

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> Argument:
        """
        Każda niepusta linia to zdanie; ostatnia jest wnioskiem.

        Raises:
            EmptyArgumentError: brak niepustych linii.
            SentenceParseError: linia nie daje się sparsować (patrz grammar).
        """
        lines = [line for line in text.splitlines() if line.strip()]
        if not lines:
            raise EmptyArgumentError("Rozumowanie jest puste — brak wniosku.")

        expressions = [parse_sentence(line, strict) for line in lines]
        return cls(premises=tuple(expressions[:-1]), conclusion=expressions[-1])

    @property
    def variables(self) -> dict[str, str]:
        return dict(self._variables)

    # ------------------------------------------------------------------

    def search(
        self,
        limits: SearchLimits | None = None,
        rules:  Sequence[InferenceRule] | None = None,
    ) -> SearchResult:
        engine = InferenceEngine(self.premises, rules=rules, limits=limits)
        return engine.search(self.conclusion)

    def check(
        self,
        limits: SearchLimits | None = None,
        rules:  Sequence[InferenceRule] | None = None,
    ) -> bool:
        """
        True gdy wniosek wynika z przesłanek, False gdy saturacja go nie dała.

        Raises:
            SearchExhaustedError: przeszukiwanie przerwane przez limit.
        """
        result = self.search(limits, rules)
        if result.verdict == Verdict.INCONCLUSIVE:
            raise SearchExhaustedError(result)
        return result.derived

    def __str__(self) -> str:
        lines = [f"{symbol}: {text}" for symbol, text in self._variables.items()]
        lines.extend(str(premise) for premise in self.premises)
        lines.append(f"Conclusion: {self.conclusion}")
        return "\n".join(lines)
