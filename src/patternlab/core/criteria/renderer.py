from __future__ import annotations

"""
Record Renderer.

Formats records as single human-readable lines for console reports.
"""

from typing import List, Mapping, Optional, Sequence

from patternlab.domain.record_models import Record


def describe_record(
        record: Record,
        labels: Optional[Mapping[str, str]] = None,
        title: str = "Person",
) -> str:
    """
    Render a record as ``<title> : [ Label : value, ... ]``.

    Args:
        record: Record to render.
        labels: Optional field-name to display-label mapping. When given,
                only the listed fields are shown, in mapping order.
        title: Leading tag of the line.

    Returns:
        str: Formatted line.
    """
    if labels is None:
        pairs = [(key, value) for key, value in record.fields.items()]
    else:
        pairs = [(label, record.get(key) or "") for key, label in labels.items()]

    body = ", ".join(f"{label} : {value}" for label, value in pairs)
    return f"{title} : [ {body} ]"


def render_records(
        records: Sequence[Record],
        labels: Optional[Mapping[str, str]] = None,
        title: str = "Person",
) -> List[str]:
    """Render every record with describe_record, keeping order."""
    return [describe_record(r, labels, title) for r in records]
