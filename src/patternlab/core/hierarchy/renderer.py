from __future__ import annotations

"""
Hierarchy Renderer.

Converts a Node tree into human-readable lines, either with ASCII branch
connectors or as an indented flat listing.
"""

from typing import List, Tuple

from patternlab.core.hierarchy.traversal import walk_with_depth
from patternlab.domain.hierarchy_models import Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Node) -> List[str]:
    """
    Render the tree using standard connectors (├──, └──).

    Args:
        root: Top of the hierarchy. Rendered without a connector.

    Returns:
        List[str]: One line per node, in pre-order.
    """
    lines: List[str] = [root.describe()]

    # Pending entries: (node, prefix of its line, is last sibling)
    stack: List[Tuple[Node, str, bool]] = _pending_children(root, prefix="")
    while stack:
        node, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{node.describe()}")

        new_prefix = prefix + ("    " if is_last else "│   ")
        stack.extend(_pending_children(node, new_prefix))

    return lines


def render_flat(root: Node, indent: str = "  ") -> List[str]:
    """Render one line per node in pre-order, indented by depth."""
    return [f"{indent * depth}{node.describe()}" for depth, node in walk_with_depth(root)]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _pending_children(node: Node, prefix: str) -> List[Tuple[Node, str, bool]]:
    """Children of ``node`` in stack order (rightmost first)."""
    children = node.get_children()
    total = len(children)
    entries = [(child, prefix, i == total - 1) for i, child in enumerate(children)]
    entries.reverse()
    return entries
