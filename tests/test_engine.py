import pytest

from grammar import parse_sentence
from solver import (
    Argument,
    InferenceEngine,
    SearchExhaustedError,
    SearchLimits,
    Verdict,
    rules_table,
)


def argument(*lines: str) -> Argument:
    return Argument.parse("\n".join(lines))


@pytest.mark.parametrize(
    "premises, conclusion, expected",
    [
        (["if p, then q", "p"], "q", True),
        (["if p, then q", "not q"], "not p", True),
        (["if p, then q", "if q, then r"], "if p, then r", True),
        (["p or q", "not p"], "q", True),
        (["p or q", "not p or r"], "q or r", True),
        (["p", "q"], "r", False),
    ],
)
def test_rule_spot_checks(premises, conclusion, expected):
    assert argument(*premises, conclusion).check() is expected


@pytest.mark.parametrize(
    "premises, conclusion",
    [
        (["if p, then q", "q"], "p"),
        (["p or q", "p"], "not q"),
        (["if p, then q"], "q"),
    ],
)
def test_invalid_arguments_are_not_derived(premises, conclusion):
    result = argument(*premises, conclusion).search()
    assert result.verdict == Verdict.NOT_DERIVED
    assert result.derived is False


def test_chained_derivation():
    assert argument("if p, then q", "if q, then r", "p", "r").check() is True
    assert argument("if p, then q", "if q, then r", "not r", "not p").check() is True


def test_natural_language_argument():
    assert argument(
        "if it rains, then the ground is wet",
        "it rains",
        "the ground is wet",
    ).check() is True


def test_derivation_records_rule():
    result = argument("if p, then q", "p", "q").search()

    last = result.derivations[-1]
    assert last.rule == "modus ponens"
    assert last.fact == parse_sentence("q")
    assert last.left == parse_sentence("if p, then q")
    assert last.right == parse_sentence("p")


def test_conclusion_already_a_premise():
    result = argument("p", "q", "p").search()
    assert result.verdict == Verdict.NOT_DERIVED
    assert result.derivations == []


def test_single_sentence_has_nothing_to_derive():
    assert argument("q").check() is False


def test_working_list_has_no_duplicates():
    premises = [parse_sentence(line) for line in ("p or q", "not p or r", "not q", "if r, then s", "p", "p")]
    engine = InferenceEngine(premises)
    unreachable = parse_sentence("z")

    first = engine.search(unreachable)
    second = engine.search(unreachable)

    assert first.verdict == Verdict.NOT_DERIVED
    assert len(set(first.facts)) == len(first.facts)
    assert first.facts == second.facts
    assert len(first.derivations) > 0


def test_search_does_not_mutate_premises():
    arg = argument("if p, then q", "if q, then r", "p", "z")
    before = arg.premises

    arg.search()
    arg.search()

    assert arg.premises == before
    assert len(arg.premises) == 3


def test_step_limit_is_inconclusive():
    arg = argument("if p, then q", "if q, then r", "if r, then s", "t")
    result = arg.search(SearchLimits(max_steps=1))

    assert result.verdict == Verdict.INCONCLUSIVE
    assert result.steps == 1

    with pytest.raises(SearchExhaustedError) as exc_info:
        arg.check(SearchLimits(max_steps=1))
    assert exc_info.value.result.verdict == Verdict.INCONCLUSIVE


def test_fact_limit_is_inconclusive():
    arg = argument("p", "q", "r", "s")
    assert arg.search(SearchLimits(max_facts=2)).verdict == Verdict.INCONCLUSIVE


def test_time_limit_is_inconclusive():
    arg = argument("if p, then q", "if q, then r", "p", "r")
    result = arg.search(SearchLimits(max_seconds=-1.0))

    assert result.verdict == Verdict.INCONCLUSIVE
    assert result.steps == 0
    assert result.derivations == []


def test_conjunction_is_opt_in():
    arg = argument("p", "q", "p and q")

    assert arg.check() is False
    assert arg.check(rules=rules_table(with_conjunction=True)) is True


def test_conjunction_blow_up_is_bounded():
    arg = argument("p", "q", "r", "t")
    result = arg.search(SearchLimits(max_facts=50), rules_table(with_conjunction=True))

    assert result.verdict == Verdict.INCONCLUSIVE
    assert len(result.facts) <= 50 + 2 * len(rules_table(with_conjunction=True))
