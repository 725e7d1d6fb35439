"""
grammar/patterns.py — wzorce regex rozpoznające spójniki w zdaniach.

Każdy ConnectivePattern zawiera:
  - connective: spójnik tworzony przy dopasowaniu
  - regex     : skompilowany wzorzec z grupami (lewa strona, prawa strona)

Wzorce są testowane w kolejności IFF > IMPLY > OR > AND; pierwszy pasujący
wygrywa. Lewa strona dopasowywana jest leniwie, więc zdanie dzieli pierwsze
wystąpienie słowa kluczowego ("p or q or r" → p ∨ (q ∨ r)).
Nie ma tabeli priorytetów operatorów — niejednoznaczne zdania rozstrzyga
wyłącznie ta kolejność.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from propositions import Connective


@dataclass(frozen=True, slots=True)
class ConnectivePattern:
    connective: Connective
    regex: re.Pattern[str]


def _p(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE | re.UNICODE)


PATTERNS: list[ConnectivePattern] = [
    ConnectivePattern(Connective.IFF,   _p(r"^(.+?)\s+iff\s+(.+)$")),
    ConnectivePattern(Connective.IMPLY, _p(r"^if\s+(.+?)\s*,\s*then\s+(.+)$")),
    ConnectivePattern(Connective.OR,    _p(r"^(.+?)\s+or\s+(.+)$")),
    ConnectivePattern(Connective.AND,   _p(r"^(.+?)\s+and\s+(.+)$")),
]

# Znacznik negacji w klauzuli atomowej: słowo "not" + biały znak.
# Samo "not" na końcu klauzuli (np. "p or not") nie jest negacją, tylko atomem "n".
NEGATION_RE = _p(r"\bnot\s+")

# Słowa kluczowe spójników; w trybie strict nie mogą zostać w atomie
KEYWORD_RE = _p(r"\b(if|then|iff|or|and|xor)\b")
