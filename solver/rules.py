"""
solver/rules.py — reguły wnioskowania logiki zdań.

Każda reguła to czysta funkcja (p1, p2) → Expression | None. Reguły nie są
przemienne: silnik wywołuje każdą w obu kolejnościach argumentów.
Operandy wyciągamy wyłącznie przez unpack_operands().

  modus ponens             p1 = A → B,  p2 = A          ⊢ B
  modus tollens            p1 = A → B,  p2 = ¬B         ⊢ ¬A
  sylogizm hipotetyczny    p1 = A → B,  p2 = B → C      ⊢ A → C
  sylogizm dysjunkcyjny    p1 = A ∨ B,  p2 = ¬A         ⊢ B
  rezolucja                p1 = A ∨ B,  p2 = ¬A ∨ C     ⊢ B ∨ C

Koniunkcja (⊢ p1 ^ p2) jest dostępna, ale poza domyślną tablicą RULES:
łączy każdą parę faktów, więc eksploduje kombinatorycznie.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from propositions import Connective, Expression, unpack_operands


@dataclass(frozen=True, slots=True)
class InferenceRule:
    name:  str
    apply: Callable[[Expression, Expression], Expression | None]


def _is(expression: Expression, connective: Connective) -> bool:
    # zanegowany spójnik (np. ¬(A → B)) nie jest implikacją ani alternatywą
    return expression.connective == connective and not expression.negated


# ---------------------------------------------------------------------------
# Reguły
# ---------------------------------------------------------------------------

def modus_ponens(p1: Expression, p2: Expression) -> Expression | None:
    if not _is(p1, Connective.IMPLY):
        return None
    antecedent, consequent = unpack_operands(p1.operands)
    return consequent if antecedent == p2 else None


def modus_tollens(p1: Expression, p2: Expression) -> Expression | None:
    if not _is(p1, Connective.IMPLY):
        return None
    antecedent, consequent = unpack_operands(p1.operands)
    return antecedent.negate() if consequent.negate() == p2 else None


def hypothetical_syllogism(p1: Expression, p2: Expression) -> Expression | None:
    if not (_is(p1, Connective.IMPLY) and _is(p2, Connective.IMPLY)):
        return None
    first, middle  = unpack_operands(p1.operands)
    middle_2, last = unpack_operands(p2.operands)
    if middle != middle_2:
        return None
    return Expression.combine(first, last, Connective.IMPLY)


def disjunctive_syllogism(p1: Expression, p2: Expression) -> Expression | None:
    if not _is(p1, Connective.OR):
        return None
    left, right = unpack_operands(p1.operands)
    return right if left.negate() == p2 else None


def resolution(p1: Expression, p2: Expression) -> Expression | None:
    if not (_is(p1, Connective.OR) and _is(p2, Connective.OR)):
        return None
    literal, rest_1    = unpack_operands(p1.operands)
    complement, rest_2 = unpack_operands(p2.operands)
    if literal.negate() != complement:
        return None
    return Expression.combine(rest_1, rest_2, Connective.OR)


def conjunction(p1: Expression, p2: Expression) -> Expression | None:
    return Expression.combine(p1, p2, Connective.AND)


# ---------------------------------------------------------------------------
# Tablice reguł
# ---------------------------------------------------------------------------

MODUS_PONENS           = InferenceRule("modus ponens", modus_ponens)
MODUS_TOLLENS          = InferenceRule("modus tollens", modus_tollens)
HYPOTHETICAL_SYLLOGISM = InferenceRule("hypothetical syllogism", hypothetical_syllogism)
DISJUNCTIVE_SYLLOGISM  = InferenceRule("disjunctive syllogism", disjunctive_syllogism)
RESOLUTION             = InferenceRule("resolution", resolution)
CONJUNCTION            = InferenceRule("conjunction", conjunction)

RULES: list[InferenceRule] = [
    MODUS_PONENS,
    MODUS_TOLLENS,
    HYPOTHETICAL_SYLLOGISM,
    DISJUNCTIVE_SYLLOGISM,
    RESOLUTION,
]


def rules_table(with_conjunction: bool = False) -> list[InferenceRule]:
    """Domyślna tablica reguł, opcjonalnie z koniunkcją na końcu."""
    if with_conjunction:
        return [*RULES, CONJUNCTION]
    return list(RULES)
