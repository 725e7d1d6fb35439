"""
grammar/parser.py — zdanie w języku naturalnym → Expression.

Publiczne API:
  parse_sentence(line, strict=False) -> Expression
  parse_atomic(clause, strict=False) -> AtomicProposition

Każda dopasowana strona jest parsowana rekurencyjnie tą samą gramatyką,
a wynik łączony przez Expression.combine() (czyli pack_operands()).
Zdanie niepasujące do żadnego wzorca jest klauzulą atomową; w trybie
strict klauzula zawierająca nierozpoznane słowo spójnika to błąd.
"""

from __future__ import annotations

from propositions import AtomicProposition, Expression

from .patterns import KEYWORD_RE, NEGATION_RE, PATTERNS
from .types import ParseErrorKind, SentenceParseError


def parse_sentence(line: str, strict: bool = False) -> Expression:
    """
    Parsuje jedno zdanie.

    Przykłady::

        "if p, then q"   → (p → q)
        "p or not q"     → (p ∨ ¬q)
        "p and q or r"   → ((p ^ q) ∨ r)
        "it rains"       → i

    Raises:
        SentenceParseError gdy klauzula jest pusta lub (strict) zawiera
        nierozpoznaną składnię spójnika.
    """
    text = line.strip()

    for pattern in PATTERNS:
        m = pattern.regex.match(text)
        if m:
            left  = parse_sentence(m.group(1), strict)
            right = parse_sentence(m.group(2), strict)
            return Expression.combine(left, right, pattern.connective)

    return Expression.atomic(parse_atomic(text, strict))


def parse_atomic(clause: str, strict: bool = False) -> AtomicProposition:
    """
    Klauzula atomowa: 'not ' oznacza negację i jest usuwane z tekstu,
    symbol to pierwszy znak pozostałego tekstu (małą literą).
    """
    negated = NEGATION_RE.search(clause) is not None
    text    = NEGATION_RE.sub("", clause).strip()

    if not text:
        raise SentenceParseError(
            ParseErrorKind.EMPTY_CLAUSE,
            clause,
            f"Pusta klauzula atomowa: '{clause}'",
        )

    if strict:
        m = KEYWORD_RE.search(text)
        if m:
            raise SentenceParseError(
                ParseErrorKind.UNRECOGNIZED_CONNECTIVE,
                clause,
                f"Nierozpoznana składnia spójnika '{m.group(1)}' w klauzuli: '{clause}'",
            )

    return AtomicProposition(symbol=text[0].lower(), text=text, negated=negated)
