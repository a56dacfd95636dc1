from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI and makes sure uncaught exceptions are logged
before the process exits.
"""

import logging
import sys
import traceback
from typing import Any, List, Optional

from patternlab.interface.cli.app import main as cli_main


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """Log an uncaught exception with its trace and exit with status 1."""
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("patternlab.supervisor").critical(
        f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}"
    )
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


def main(argv: Optional[List[str]] = None) -> int:
    sys.excepthook = global_exception_handler
    return cli_main(argv)


if __name__ == "__main__":
    sys.exit(main())
