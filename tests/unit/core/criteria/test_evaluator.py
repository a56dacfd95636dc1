from __future__ import annotations

"""
Unit tests for the criteria evaluator.

Verifies:
1. Case-insensitive leaf matching and order preservation.
2. And as sequential narrowing.
3. Or as ordered, identity-deduplicated union.
4. Purity and empty-input behaviour.
"""

import pytest

from patternlab.core.criteria.evaluator import evaluate, matches
from patternlab.domain.predicate_models import And, FieldEquals, Or, all_of, any_of
from patternlab.domain.record_models import Record

MALE = FieldEquals("gender", "Male")
FEMALE = FieldEquals("gender", "Female")
SINGLE = FieldEquals("maritalStatus", "Single")


def _names(records):
    return [r.get("name") for r in records]


def test_leaf_keeps_input_order(people):
    assert _names(evaluate(MALE, people)) == ["Robert", "John", "Mike", "Bobby"]


def test_leaf_is_case_insensitive(people):
    assert _names(evaluate(FieldEquals("gender", "mALe"), people)) == [
        "Robert", "John", "Mike", "Bobby"
    ]
    mixed = [Record.of(gender="FEMALE"), Record.of(gender="female")]
    assert evaluate(FEMALE, mixed) == mixed


def test_leaf_missing_field_never_matches():
    records = [Record.of(name="NoGender"), Record.of(name="Ann", gender="Female")]
    assert _names(evaluate(FEMALE, records)) == ["Ann"]


def test_and_narrows_sequentially(people):
    assert _names(evaluate(And(SINGLE, MALE), people)) == ["Robert", "Mike", "Bobby"]


def test_or_orders_left_then_novel_right(people):
    result = evaluate(Or(SINGLE, FEMALE), people)
    assert _names(result) == ["Robert", "Diana", "Mike", "Bobby", "Laura"]


def test_or_is_not_order_symmetric(people):
    """Swapping operands keeps the set but changes the order."""
    forward = evaluate(Or(SINGLE, FEMALE), people)
    backward = evaluate(Or(FEMALE, SINGLE), people)

    assert _names(backward) == ["Laura", "Diana", "Robert", "Mike", "Bobby"]
    assert set(map(id, forward)) == set(map(id, backward))


def test_or_deduplicates_by_identity_not_value():
    """Records with equal values but distinct identity are both kept."""
    twin_a = Record.of(name="Twin", gender="Male", maritalStatus="Single")
    twin_b = Record.of(name="Twin", gender="Male", maritalStatus="Single")

    result = evaluate(Or(MALE, SINGLE), [twin_a, twin_b])

    assert len(result) == 2
    assert result[0] is twin_a and result[1] is twin_b


def test_or_keeps_duplicate_entries_from_left():
    """The same record listed twice on input appears twice via the left side."""
    r = Record.of(name="Robert", gender="Male", maritalStatus="Single")
    assert evaluate(Or(MALE, SINGLE), [r, r]) == [r, r]


def test_nested_combinations(people):
    single_male_or_female = Or(And(SINGLE, MALE), FEMALE)
    assert _names(evaluate(single_male_or_female, people)) == [
        "Robert", "Mike", "Bobby", "Laura", "Diana"
    ]

    named = FieldEquals("name", "mike")
    assert _names(evaluate(all_of(SINGLE, MALE, named), people)) == ["Mike"]
    assert _names(evaluate(any_of(named, FEMALE), people)) == ["Mike", "Laura", "Diana"]


def test_evaluate_does_not_mutate_input(people):
    snapshot = list(people)
    result = evaluate(Or(SINGLE, FEMALE), people)

    assert people == snapshot
    assert result is not people


@pytest.mark.parametrize("predicate", [MALE, And(SINGLE, MALE), Or(SINGLE, FEMALE)])
def test_empty_input_yields_empty(predicate):
    assert evaluate(predicate, []) == []


def test_no_match_yields_empty(people):
    assert evaluate(And(FEMALE, MALE), people) == []


def test_unknown_predicate_raises(people):
    with pytest.raises(TypeError):
        evaluate(lambda r: True, people)  # type: ignore[arg-type]


def test_matches_single_record(people):
    robert, john = people[0], people[1]
    assert matches(And(SINGLE, MALE), robert) is True
    assert matches(And(SINGLE, MALE), john) is False


def test_deeply_nested_predicates_evaluate():
    """1500 chained conditions evaluate without hitting the recursion limit."""
    record = Record.of(g="X")
    other = Record.of(g="Y")
    leaf = FieldEquals("g", "x")

    assert evaluate(all_of(*[leaf] * 1500), [record, other]) == [record]

    deep_or = any_of(*[FieldEquals("g", "none")] * 1499, FieldEquals("g", "y"))
    assert evaluate(deep_or, [record, other]) == [other]
