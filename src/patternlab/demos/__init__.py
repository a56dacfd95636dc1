from __future__ import annotations

from .organisation import build_organisation, organisation_report
from .people import PERSON_LABELS, build_people, people_report

__all__ = [
    "PERSON_LABELS",
    "build_organisation",
    "build_people",
    "organisation_report",
    "people_report",
]
