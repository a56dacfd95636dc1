from __future__ import annotations

"""
Person Filtering Demo.

Filters a fixed list of people with leaf criteria and their And/Or
combinations.
"""

from typing import Dict, List

from patternlab.core.criteria.evaluator import evaluate
from patternlab.core.criteria.renderer import render_records
from patternlab.domain.predicate_models import And, FieldEquals, Or
from patternlab.domain.record_models import Record

PERSON_LABELS: Dict[str, str] = {
    "name": "Name",
    "gender": "Gender",
    "maritalStatus": "Marital Status",
}

MALE = FieldEquals("gender", "Male")
FEMALE = FieldEquals("gender", "Female")
SINGLE = FieldEquals("maritalStatus", "Single")


def build_people() -> List[Record]:
    """Return the sample population, in reporting order."""
    return [
        Record.of(name="Robert", gender="Male", maritalStatus="Single"),
        Record.of(name="John", gender="Male", maritalStatus="Married"),
        Record.of(name="Laura", gender="Female", maritalStatus="Married"),
        Record.of(name="Diana", gender="Female", maritalStatus="Single"),
        Record.of(name="Mike", gender="Male", maritalStatus="Single"),
        Record.of(name="Bobby", gender="Male", maritalStatus="Single"),
    ]


def people_report() -> List[str]:
    """Produce the printable lines of the four filter sections."""
    persons = build_people()
    sections = [
        ("Males: ", MALE),
        ("Females: ", FEMALE),
        ("Single Males: ", And(SINGLE, MALE)),
        ("Single Or Females: ", Or(SINGLE, FEMALE)),
    ]

    lines: List[str] = []
    for i, (heading, criteria) in enumerate(sections):
        if i:
            lines.append("")
        lines.append(heading)
        lines.extend(render_records(evaluate(criteria, persons), PERSON_LABELS))
    return lines
