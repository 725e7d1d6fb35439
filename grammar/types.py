"""
grammar/types.py — rodzaje błędów parsera zdań.
"""

from __future__ import annotations

from enum import StrEnum


class ParseErrorKind(StrEnum):
    """Stałe kody błędów parsera."""
    EMPTY_CLAUSE            = "E_EMPTY_CLAUSE"
    UNRECOGNIZED_CONNECTIVE = "E_UNRECOGNIZED_CONNECTIVE"


class SentenceParseError(ValueError):
    """
    Zdanie (lub jego fragment) nie daje się sparsować.

    - kind:   ParseErrorKind
    - clause: fragment zdania, na którym parser się zatrzymał
    """

    def __init__(self, kind: ParseErrorKind, clause: str, message: str) -> None:
        super().__init__(message)
        self.kind   = kind
        self.clause = clause
