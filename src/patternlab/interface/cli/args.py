from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from patternlab.domain.config import DEMO_CHOICES, TREE_STYLES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the patternlab CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="patternlab",
        description="Composite hierarchy and filter criteria demonstrations.",
    )

    p.add_argument(
        "--demo",
        choices=DEMO_CHOICES,
        default=None,
        help="Scenario to run (default: all).",
    )
    p.add_argument(
        "--style",
        dest="tree_style",
        choices=TREE_STYLES,
        default=None,
        help="Hierarchy rendering: connectors or indented lines.",
    )
    p.add_argument(
        "--total-weight",
        action="store_true",
        help="Append the summed salary of the organisation.",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Logging threshold name (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on invalid configuration instead of using defaults.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Shortcut for --log-level DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually set are returned.
    """
    overrides: Dict[str, Any] = {}

    if args.demo is not None:
        overrides["demo"] = args.demo
    if args.tree_style is not None:
        overrides["tree_style"] = args.tree_style
    if args.total_weight:
        overrides["show_total_weight"] = True
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
