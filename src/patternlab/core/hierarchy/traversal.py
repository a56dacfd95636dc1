from __future__ import annotations

"""
Hierarchy Traversal Services.

Depth-first, pre-order walks over a Node tree: a node is visited before
its children, children left to right. Walks use an explicit stack, so
tree depth is bounded only by memory. Cycles are not detected.
"""

from typing import Iterator, List, Optional, Tuple

from patternlab.domain.hierarchy_models import Node, Weight

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def walk(root: Node) -> Iterator[Node]:
    """
    Yield every node of the tree in pre-order.

    Args:
        root: Node where the walk starts.

    Yields:
        Node: Visited nodes, root first.
    """
    for _, node in walk_with_depth(root):
        yield node


def walk_with_depth(root: Node, depth: int = 0) -> Iterator[Tuple[int, Node]]:
    """Pre-order walk that also reports the depth of each node (root = 0)."""
    stack: List[Tuple[int, Node]] = [(depth, root)]
    while stack:
        level, node = stack.pop()
        yield level, node

        # Reversed so the leftmost child is popped first
        for child in reversed(node.get_children()):
            stack.append((level + 1, child))


def find(root: Node, name: str) -> Optional[Node]:
    """
    Locate the first node, in pre-order, whose name equals ``name``.

    Returns:
        Optional[Node]: Matching node or None.
    """
    for node in walk(root):
        if node.name == name:
            return node
    return None


def total_weight(root: Node) -> Weight:
    """Sum the weight of every node in the subtree rooted at ``root``."""
    return sum(node.weight for node in walk(root))
