"""
solver — silnik wnioskowania logiki zdań (saturacja w przód).

Publiczne API:
  InferenceEngine(premises, rules, limits)   klasa silnika
  Argument                                   przesłanki + wniosek, parse/check
  collect_variables(expression)              → dict[symbol, tekst]
  RULES, rules_table(with_conjunction)       tablice reguł wnioskowania
  SearchLimits, SearchResult, Derivation     typy danych
  Verdict                                    DERIVED / NOT_DERIVED / INCONCLUSIVE
  EmptyArgumentError, SearchExhaustedError   błędy
"""

from .argument import Argument, EmptyArgumentError, collect_variables
from .engine   import InferenceEngine
from .rules    import (
    InferenceRule,
    RULES,
    CONJUNCTION,
    rules_table,
    modus_ponens,
    modus_tollens,
    hypothetical_syllogism,
    disjunctive_syllogism,
    resolution,
    conjunction,
)
from .types    import (
    Verdict,
    SearchLimits,
    SearchResult,
    Derivation,
    SearchExhaustedError,
)

__all__ = [
    "Argument",
    "EmptyArgumentError",
    "collect_variables",
    "InferenceEngine",
    "InferenceRule",
    "RULES",
    "CONJUNCTION",
    "rules_table",
    "modus_ponens",
    "modus_tollens",
    "hypothetical_syllogism",
    "disjunctive_syllogism",
    "resolution",
    "conjunction",
    "Verdict",
    "SearchLimits",
    "SearchResult",
    "Derivation",
    "SearchExhaustedError",
]
