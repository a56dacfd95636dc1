from __future__ import annotations

"""
Organisational Hierarchy Data Models.

Provides the composite node used to assemble part/whole hierarchies
(employees and their subordinates). A node exclusively owns an ordered
sequence of children; no parent back-reference is kept.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple, Union

logger = logging.getLogger(__name__)

Weight = Union[int, float]

# -----------------------------------------------------------------------------
# COMPOSITE NODE
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class Node:
    """
    A single element of the hierarchy, owning zero or more child nodes.

    Attributes:
        name: Identifier of the node. Not guaranteed unique.
        category: Free-form grouping label (e.g. department).
        weight: Numeric payload carried for display (e.g. salary).
    """
    name: str
    category: str
    weight: Weight
    _children: List[Node] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Node name must be str, received {type(self.name).__name__}.")
        if not isinstance(self.category, str):
            raise TypeError(
                f"Node category must be str, received {type(self.category).__name__}."
            )
        if isinstance(self.weight, bool) or not isinstance(self.weight, (int, float)):
            raise TypeError(
                f"Node weight must be int or float, received {type(self.weight).__name__}."
            )

    # -------------------------------------------------------------------------
    # CHILD MANAGEMENT
    # -------------------------------------------------------------------------

    def add(self, child: Node) -> None:
        """
        Append a child at the end of the child sequence.

        Duplicate names are allowed and kept in insertion order. Acyclicity
        is the caller's responsibility.
        """
        if not isinstance(child, Node):
            raise TypeError(f"Expected Node, received {type(child).__name__}.")
        self._children.append(child)
        logger.debug(f"Attached '{child.name}' under '{self.name}'")

    def remove(self, child: Node) -> bool:
        """
        Detach the first child whose name equals ``child.name``.

        A missing name is a silent no-op.

        Returns:
            bool: True if an entry was removed, False otherwise.
        """
        for index, current in enumerate(self._children):
            if current.name == child.name:
                del self._children[index]
                logger.debug(f"Detached '{current.name}' from '{self.name}'")
                return True

        logger.debug(f"No child named '{child.name}' under '{self.name}'")
        return False

    def get_children(self) -> Tuple[Node, ...]:
        """Return a snapshot of the current child sequence."""
        return tuple(self._children)

    # -------------------------------------------------------------------------
    # PRESENTATION
    # -------------------------------------------------------------------------

    def describe(self) -> str:
        """Render this node alone (children are not included)."""
        return f"Employee :[ Name : {self.name}, dept : {self.category}, salary :{self.weight} ]"

    def __str__(self) -> str:
        return self.describe()
