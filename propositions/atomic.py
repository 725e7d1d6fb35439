"""
propositions/atomic.py — zdanie atomowe (zmienna zdaniowa).

AtomicProposition jest wartością niemutowalną: negate() zwraca nową kopię,
nigdy nie zmienia obiektu współdzielonego przez kilka wyrażeń.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

NEGATION_MARK = "¬"


@dataclass(frozen=True, slots=True)
class AtomicProposition:
    """
    Zmienna zdaniowa: jedna litera, opcjonalnie zanegowana.

    - symbol:  litera identyfikująca zmienną (pierwszy znak klauzuli)
    - text:    tekst klauzuli bez znacznika 'not ' (tylko do wyświetlania)
    - negated: jeśli True → ¬symbol

    Równość i hash zależą wyłącznie od (symbol, negated) — dwie klauzule
    o różnym tekście, ale tej samej literze, to ten sam fakt logiczny.
    """
    symbol:  str
    text:    str  = field(default="", compare=False)
    negated: bool = False

    def negate(self) -> AtomicProposition:
        return replace(self, negated=not self.negated)

    def __str__(self) -> str:
        mark = NEGATION_MARK if self.negated else ""
        return f"{mark}{self.symbol}"
