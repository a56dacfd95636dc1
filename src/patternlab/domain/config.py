from __future__ import annotations

"""
Runtime Configuration Defaults.

Holds the dictionary-based session configuration that drives the demo
runner. Values are never persisted; every run starts from these defaults
and applies command-line overrides on top.
"""

from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEMO_CHOICES: List[str] = ["all", "composite", "criteria"]
TREE_STYLES: List[str] = ["tree", "flat"]
DEFAULT_LOG_LEVEL = "INFO"


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Scenario selection
        "demo": "all",

        # Hierarchy presentation
        "tree_style": "tree",
        "show_total_weight": False,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
    }
