"""
grammar — parser zdań w języku naturalnym (angielskie słowa kluczowe).

Publiczne API:
  parse_sentence(line, strict)   → Expression
  parse_atomic(clause, strict)   → AtomicProposition
  PATTERNS                       wzorce spójników w kolejności priorytetu
  SentenceParseError, ParseErrorKind
"""

from .parser import parse_sentence, parse_atomic
from .patterns import PATTERNS, ConnectivePattern
from .types import ParseErrorKind, SentenceParseError

__all__ = [
    "parse_sentence",
    "parse_atomic",
    "PATTERNS",
    "ConnectivePattern",
    "ParseErrorKind",
    "SentenceParseError",
]
