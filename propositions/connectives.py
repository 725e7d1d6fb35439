"""
propositions/connectives.py — spójniki dwuargumentowe.

Tylko AND, OR i IMPLY biorą udział w regułach wnioskowania;
XOR i IFF są reprezentowane (parser, wyświetlanie), ale solver ich nie używa.
"""

from __future__ import annotations

from enum import StrEnum


class Connective(StrEnum):
    """Spójnik logiczny łączący dokładnie dwa operandy."""
    AND   = "and"
    OR    = "or"
    XOR   = "xor"
    IMPLY = "imply"
    IFF   = "iff"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS: dict[Connective, str] = {
    Connective.AND:   "^",
    Connective.OR:    "∨",
    Connective.XOR:   "⊕",
    Connective.IMPLY: "→",
    Connective.IFF:   "⟷",
}

# Spójniki, dla których (P op P) redukuje się do samego P
REDUNDANT_CONNECTIVES: frozenset[Connective] = frozenset({Connective.AND, Connective.OR})
