"""
propositions — model wyrażeń logiki zdań.

Użycie:
  from propositions import AtomicProposition, Connective, Expression, ...

Moduły:
  atomic       — AtomicProposition (litera + negacja + tekst źródłowy)
  connectives  — Connective (AND, OR, XOR, IMPLY, IFF) z symbolami
  expression   — Expression, warianty operandów, pack_operands / unpack_operands
"""

from .atomic import NEGATION_MARK, AtomicProposition
from .connectives import REDUNDANT_CONNECTIVES, Connective
from .expression import (
    Side,
    BothAtomic,
    BothExpression,
    OneAtomicOneExpression,
    OperandPair,
    Expression,
    pack_operands,
    unpack_operands,
)

__all__ = [
    # atomic
    "NEGATION_MARK",
    "AtomicProposition",
    # connectives
    "REDUNDANT_CONNECTIVES",
    "Connective",
    # expression
    "Side",
    "BothAtomic",
    "BothExpression",
    "OneAtomicOneExpression",
    "OperandPair",
    "Expression",
    "pack_operands",
    "unpack_operands",
]
