from __future__ import annotations

"""
Logging Settings.

The CLI only ever logs to stderr, so the settings are the threshold and
the line format.
"""

import logging
from dataclasses import dataclass
from typing import Dict

LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        level: Minimum severity name captured by the root logger.
        console: Emit records on stderr; when False nothing is installed.
        fmt: Line format of console records.
    """
    level: str = "INFO"
    console: bool = True
    fmt: str = "%(levelname)s | %(name)s | %(message)s"
