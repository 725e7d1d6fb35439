"""
propositions/expression.py — wyrażenie złożone (drzewo binarne spójników).

Operandy wyrażenia przechowywane są w jednym z trzech wariantów:
  BothAtomic              — obie strony to zdania atomowe
  BothExpression          — obie strony to pełne poddrzewa
  OneAtomicOneExpression  — jedna strona zdegradowana do atomu;
                            pole side mówi, czy atom stoi logicznie po lewej,
                            czy po prawej

Degradacja: poddrzewo (P op P) z op ∈ {AND, OR} jest redundantne i zwija się
do samego P (albo ¬P, gdy całe wyrażenie jest zanegowane). Jedynym miejscem,
które rozróżnia warianty przy budowaniu/rozbieraniu operandów, są
pack_operands() i unpack_operands() — reguły wnioskowania widzą zawsze
parę pełnych wyrażeń.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Iterator, TypeAlias

from .atomic import NEGATION_MARK, AtomicProposition
from .connectives import REDUNDANT_CONNECTIVES, Connective


class Side(StrEnum):
    """Po której stronie spójnika stoi zdegradowany atom."""
    LEFT  = "left"
    RIGHT = "right"


# ---------------------------------------------------------------------------
# Warianty operandów
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BothAtomic:
    left:  AtomicProposition
    right: AtomicProposition


@dataclass(frozen=True, slots=True)
class BothExpression:
    left:  Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class OneAtomicOneExpression:
    expression: Expression
    atom:       AtomicProposition
    side:       Side


OperandPair: TypeAlias = BothAtomic | BothExpression | OneAtomicOneExpression


# ---------------------------------------------------------------------------
# Expression
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, eq=False)
class Expression:
    """
    Formuła: operands połączone spójnikiem connective, opcjonalnie zanegowana.

    Równość jest wartościowa, nigdy tożsamościowa:
      - gdy którakolwiek strona się degraduje, porównujemy zdegradowane atomy
        (P ∨ P == P ^ P == atom P),
      - w pozostałych przypadkach porównujemy spójnik, flagę negacji
        i wartości operandów (z zachowaniem kolejności).
    """
    operands:   OperandPair
    connective: Connective
    negated:    bool = False

    @classmethod
    def atomic(cls, atom: AtomicProposition) -> Expression:
        """Opakowuje goły atom jako trywialnie redundantne (P ∨ P)."""
        return cls(BothAtomic(atom, atom), Connective.OR)

    @classmethod
    def combine(
        cls,
        left:       Expression,
        right:      Expression,
        connective: Connective,
        negated:    bool = False,
    ) -> Expression:
        """Buduje (left connective right) przez pack_operands()."""
        return cls(pack_operands(left, right), connective, negated)

    # ------------------------------------------------------------------

    def degrade(self) -> AtomicProposition | None:
        """
        Zwraca atom, jeśli wyrażenie jest redundantne (AND/OR z równymi
        operandami); w przeciwnym razie None.
        """
        if self.connective not in REDUNDANT_CONNECTIVES:
            return None

        pair = self.operands
        atom: AtomicProposition | None = None
        if isinstance(pair, BothAtomic):
            if pair.left == pair.right:
                atom = pair.left
        elif isinstance(pair, BothExpression):
            if pair.left == pair.right:
                atom = pair.left.degrade()
        else:
            inner = pair.expression.degrade()
            if inner is not None and inner == pair.atom:
                atom = pair.atom

        if atom is None:
            return None
        return atom.negate() if self.negated else atom

    def negate(self) -> Expression:
        """
        Neguje każdy liść (rekurencyjnie, w obu operandach).

        Flaga negated samego wyrażenia pozostaje bez zmian — reguły porównują
        wartości operandów z przesłankami, więc negacja musi zejść do atomów.
        """
        return replace(self, operands=_negate_pair(self.operands))

    def atoms(self) -> Iterator[AtomicProposition]:
        """Wszystkie atomy osiągalne z wyrażenia (od lewej do prawej)."""
        pair = self.operands
        if isinstance(pair, BothAtomic):
            yield pair.left
            yield pair.right
        elif isinstance(pair, BothExpression):
            yield from pair.left.atoms()
            yield from pair.right.atoms()
        elif pair.side == Side.LEFT:
            yield pair.atom
            yield from pair.expression.atoms()
        else:
            yield from pair.expression.atoms()
            yield pair.atom

    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        mine, theirs = self.degrade(), other.degrade()
        if mine is not None or theirs is not None:
            return mine == theirs
        return (
            self.connective == other.connective
            and self.negated == other.negated
            and unpack_operands(self.operands) == unpack_operands(other.operands)
        )

    def __hash__(self) -> int:
        atom = self.degrade()
        if atom is not None:
            return hash(atom)
        return hash((self.connective, self.negated, unpack_operands(self.operands)))

    def __str__(self) -> str:
        atom = self.degrade()
        if atom is not None:
            return str(atom)
        left, right = unpack_operands(self.operands)
        mark = NEGATION_MARK if self.negated else ""
        return f"{mark}({left} {self.connective.symbol} {right})"


# ---------------------------------------------------------------------------
# Pakowanie / rozpakowanie operandów
# ---------------------------------------------------------------------------

def pack_operands(left: Expression, right: Expression) -> OperandPair:
    """
    Łączy dwa wyrażenia w parę operandów, degradując strony redundantne.

      obie się degradują     → BothAtomic
      tylko lewa             → OneAtomicOneExpression(right, atom, LEFT)
      tylko prawa            → OneAtomicOneExpression(left, atom, RIGHT)
      żadna                  → BothExpression
    """
    left_atom  = left.degrade()
    right_atom = right.degrade()

    if left_atom is not None and right_atom is not None:
        return BothAtomic(left_atom, right_atom)
    if left_atom is not None:
        return OneAtomicOneExpression(right, left_atom, Side.LEFT)
    if right_atom is not None:
        return OneAtomicOneExpression(left, right_atom, Side.RIGHT)
    return BothExpression(left, right)


def unpack_operands(pair: OperandPair) -> tuple[Expression, Expression]:
    """
    Odtwarza dwa pełne wyrażenia z dowolnego wariantu (w kolejności
    logicznej). Goły atom wraca jako (P ∨ P).
    """
    if isinstance(pair, BothAtomic):
        return Expression.atomic(pair.left), Expression.atomic(pair.right)
    if isinstance(pair, BothExpression):
        return pair.left, pair.right
    atom = Expression.atomic(pair.atom)
    if pair.side == Side.LEFT:
        return atom, pair.expression
    return pair.expression, atom


def _negate_pair(pair: OperandPair) -> OperandPair:
    if isinstance(pair, BothAtomic):
        return BothAtomic(pair.left.negate(), pair.right.negate())
    if isinstance(pair, BothExpression):
        return BothExpression(pair.left.negate(), pair.right.negate())
    return OneAtomicOneExpression(pair.expression.negate(), pair.atom.negate(), pair.side)
