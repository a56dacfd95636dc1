from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Parses arguments, bootstraps logging, resolves the configuration and
prints the selected demo reports.
"""

import logging
import sys
from typing import Any, Dict, List, Optional

from patternlab.core.validator import validate_config
from patternlab.demos import organisation_report, people_report
from patternlab.domain.config import get_default_config
from patternlab.infra.logging import LoggingConfig, configure_logging
from patternlab.interface.cli import args as cli_args

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional argument list. Defaults to sys.argv.

    Returns:
        int: Exit code (0 success, 1 unexpected failure, 2 invalid
             configuration, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    overrides = cli_args.args_to_overrides(args)
    raw_conf: Dict[str, Any] = dict(get_default_config())
    raw_conf.update(overrides)

    try:
        conf, warnings = validate_config(raw_conf, strict=bool(args.strict))
    except (TypeError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    configure_logging(LoggingConfig(level=conf["log_level"], console=True))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    logger.debug(f"Running demo selection '{conf['demo']}'")
    try:
        lines = build_report(conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except Exception as e:
        logger.critical(f"Demo execution failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print("\n".join(lines))
    return 0


def build_report(conf: Dict[str, Any]) -> List[str]:
    """
    Collect the lines of every demo selected in ``conf``.

    Args:
        conf: Validated configuration.

    Returns:
        List[str]: Report lines, sections separated by a blank line.
    """
    demo = conf["demo"]
    lines: List[str] = []

    if demo in ("all", "composite"):
        lines.extend(
            organisation_report(
                style=conf["tree_style"],
                show_total_weight=conf["show_total_weight"],
            )
        )

    if demo in ("all", "criteria"):
        if lines:
            lines.append("")
        lines.extend(people_report())

    return lines


if __name__ == "__main__":
    sys.exit(main())
