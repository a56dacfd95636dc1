from __future__ import annotations

"""
Predicate Expression Models.

Closed set of predicate variants used by the criteria evaluator:

- FieldEquals: leaf test on a single record field (case-insensitive).
- And: sequential narrowing (right is applied to left's output).
- Or: ordered union (left's matches, then right's novel matches).

Predicate trees hold no reference to the data they filter and can be
evaluated any number of times.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Union

# -----------------------------------------------------------------------------
# VARIANTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FieldEquals:
    """
    Leaf predicate matching records whose ``field`` equals ``value``.

    Attributes:
        field: Name of the record field to inspect.
        value: Expected value (compared case-insensitively).
    """
    field: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.field, str) or not isinstance(self.value, str):
            raise TypeError("FieldEquals expects str field and str value.")


@dataclass(frozen=True)
class And:
    """Conjunction of two predicates."""
    left: Predicate
    right: Predicate

    def __post_init__(self) -> None:
        _check_operands("And", self.left, self.right)


@dataclass(frozen=True)
class Or:
    """Disjunction of two predicates."""
    left: Predicate
    right: Predicate

    def __post_init__(self) -> None:
        _check_operands("Or", self.left, self.right)


Predicate = Union[FieldEquals, And, Or]

_VARIANTS = (FieldEquals, And, Or)

# -----------------------------------------------------------------------------
# BUILDERS
# -----------------------------------------------------------------------------

def all_of(*predicates: Predicate) -> Predicate:
    """
    Chain predicates with And, folding from the left.

    ``all_of(a, b, c)`` is ``And(And(a, b), c)``.
    """
    if not predicates:
        raise ValueError("all_of() requires at least one predicate.")
    return reduce(And, predicates)


def any_of(*predicates: Predicate) -> Predicate:
    """
    Chain predicates with Or, folding from the left.

    ``any_of(a, b, c)`` is ``Or(Or(a, b), c)``.
    """
    if not predicates:
        raise ValueError("any_of() requires at least one predicate.")
    return reduce(Or, predicates)


def _check_operands(kind: str, left: object, right: object) -> None:
    for operand in (left, right):
        if not isinstance(operand, _VARIANTS):
            raise TypeError(f"{kind} operand must be a predicate, received {type(operand).__name__}.")
