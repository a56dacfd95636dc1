from __future__ import annotations

"""
Organisation Chart Demo.

Builds a small company hierarchy with the composite Node and reports it.
"""

from typing import List

from patternlab.core.hierarchy.renderer import render_flat, render_tree
from patternlab.core.hierarchy.traversal import total_weight
from patternlab.domain.hierarchy_models import Node


def build_organisation() -> Node:
    """
    Assemble the sample company.

    John (CEO)
      Robert (Head Sales): Richard, Rob
      Michel (Head Marketing): Laura, Bob

    Returns:
        Node: The CEO node.
    """
    ceo = Node("John", "CEO", 30000)

    head_sales = Node("Robert", "Head Sales", 20000)
    head_marketing = Node("Michel", "Head Marketing", 20000)

    clerk1 = Node("Laura", "Marketing", 10000)
    clerk2 = Node("Bob", "Marketing", 10000)

    sales_executive1 = Node("Richard", "Sales", 10000)
    sales_executive2 = Node("Rob", "Sales", 10000)

    ceo.add(head_sales)
    ceo.add(head_marketing)

    head_sales.add(sales_executive1)
    head_sales.add(sales_executive2)

    head_marketing.add(clerk1)
    head_marketing.add(clerk2)

    return ceo


def organisation_report(style: str = "tree", show_total_weight: bool = False) -> List[str]:
    """
    Produce the printable lines of the organisation demo.

    Args:
        style: "tree" for connector rendering, "flat" for indented lines.
        show_total_weight: Append the payroll of the whole company.
    """
    root = build_organisation()
    lines = render_flat(root) if style == "flat" else render_tree(root)

    if show_total_weight:
        lines.append(f"Total salary : {total_weight(root)}")
    return lines
