from __future__ import annotations

"""
Console Handler Factory.

Handlers created here carry a marker attribute, so re-configuration only
removes what patternlab installed and leaves foreign handlers alone.
"""

import logging
import sys

HANDLER_TAG_ATTR: str = "_patternlab_handler"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    """Mark a handler as owned by patternlab and return it."""
    setattr(handler, HANDLER_TAG_ATTR, True)
    return handler


def is_tagged(handler: logging.Handler) -> bool:
    return bool(getattr(handler, HANDLER_TAG_ATTR, False))


def create_console_handler(level: int, fmt: str) -> logging.Handler:
    """Stream handler bound to stderr with the given threshold and format."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return tag_handler(handler)
