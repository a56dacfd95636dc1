from __future__ import annotations

"""
Criteria Evaluation Engine.

Applies predicate trees to sequences of records. Evaluation is pure: the
input sequence is never mutated and the output keeps the input's
relative order (Or appends the right side's novel matches after the
left side's).
"""

import logging
from typing import List, Sequence, Tuple

from patternlab.domain.predicate_models import And, FieldEquals, Or, Predicate
from patternlab.domain.record_models import Record

logger = logging.getLogger(__name__)

_EVAL = "eval"
_AND_RIGHT = "and_right"
_OR_RIGHT = "or_right"
_OR_MERGE = "or_merge"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def evaluate(predicate: Predicate, records: Sequence[Record]) -> List[Record]:
    """
    Return the records satisfying ``predicate``.

    Dispatch by variant:
    - FieldEquals: keep records whose field matches, ignoring case.
    - And: evaluate ``left`` on the input, then ``right`` on that result.
    - Or: evaluate both sides on the full input; keep all of ``left``,
      then every ``right`` match not already present (identity based).

    Args:
        predicate: Predicate tree to apply.
        records: Input records. Not modified.

    Returns:
        List[Record]: Newly allocated list of matching records.

    Raises:
        TypeError: If ``predicate`` is not a known variant.
    """
    # Work items are (step, predicate, records). Results of finished
    # sub-predicates are kept on ``results`` until their parent consumes them.
    results: List[List[Record]] = []
    work: List[Tuple[str, Predicate, Sequence[Record]]] = [(_EVAL, predicate, records)]

    while work:
        step, node, data = work.pop()

        if step == _EVAL:
            # Scenario A: Leaf test
            if isinstance(node, FieldEquals):
                results.append([r for r in data if _field_matches(node, r)])

            # Scenario B: Sequential narrowing
            elif isinstance(node, And):
                work.append((_AND_RIGHT, node, data))
                work.append((_EVAL, node.left, data))

            # Scenario C: Ordered union
            elif isinstance(node, Or):
                work.append((_OR_RIGHT, node, data))
                work.append((_EVAL, node.left, data))

            else:
                raise TypeError(f"Unsupported predicate type: {type(node).__name__}.")

        elif step == _AND_RIGHT:
            narrowed = results.pop()
            work.append((_EVAL, node.right, narrowed))

        elif step == _OR_RIGHT:
            # Left result stays on the stack until the right side is done
            work.append((_OR_MERGE, node, data))
            work.append((_EVAL, node.right, data))

        else:
            right = results.pop()
            merged = results.pop()
            seen = {id(r) for r in merged}
            for record in right:
                if id(record) not in seen:
                    seen.add(id(record))
                    merged.append(record)
            results.append(merged)

    return results.pop()


def matches(predicate: Predicate, record: Record) -> bool:
    """Check a single record against ``predicate``."""
    return bool(evaluate(predicate, [record]))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _field_matches(predicate: FieldEquals, record: Record) -> bool:
    """Case-insensitive comparison; a missing field never matches."""
    actual = record.get(predicate.field)
    if actual is None:
        logger.debug(f"Record lacks field '{predicate.field}'; treated as non-match")
        return False
    return actual.upper() == predicate.value.upper()
