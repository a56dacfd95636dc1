from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides the sample people and organisation used across unit tests.
"""

import os
import sys
from typing import Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from patternlab.domain.hierarchy_models import Node  # noqa: E402
from patternlab.domain.record_models import Record  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def people() -> List[Record]:
    """
    The six reference people, in input order.

    Robert/Male/Single, John/Male/Married, Laura/Female/Married,
    Diana/Female/Single, Mike/Male/Single, Bobby/Male/Single.
    """
    rows = [
        ("Robert", "Male", "Single"),
        ("John", "Male", "Married"),
        ("Laura", "Female", "Married"),
        ("Diana", "Female", "Single"),
        ("Mike", "Male", "Single"),
        ("Bobby", "Male", "Single"),
    ]
    return [Record.of(name=n, gender=g, maritalStatus=m) for n, g, m in rows]


@pytest.fixture
def small_tree() -> Dict[str, Node]:
    """
    R with children [A, B]; A with children [X, Y].

    Returns:
        Dict[str, Node]: Nodes keyed by name.
    """
    nodes = {name: Node(name, "dept", 1) for name in ("R", "A", "B", "X", "Y")}
    nodes["R"].add(nodes["A"])
    nodes["R"].add(nodes["B"])
    nodes["A"].add(nodes["X"])
    nodes["A"].add(nodes["Y"])
    return nodes
