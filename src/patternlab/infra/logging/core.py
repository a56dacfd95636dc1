from __future__ import annotations

"""
Logging Bootstrap.

Entry points call configure_logging() once. Records from every module go
through a single QueueHandler on the root logger; a QueueListener thread
forwards them to the stderr handler. Repeated calls are no-ops unless
``force`` is set.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import Optional

from patternlab.infra.logging.config import LEVELS, LoggingConfig
from patternlab.infra.logging.handlers import create_console_handler, is_tagged, tag_handler

CONFIGURED_FLAG_ATTR: str = "_patternlab_configured"
QUEUE_LISTENER_ATTR: str = "_patternlab_queue_listener"

# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Install patternlab's handlers on the root logger.

    Args:
        cfg: Logging settings.
        force: Re-install handlers even if logging is already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level = parse_level(cfg.level)
    root.setLevel(level)
    shutdown_logging()

    if not cfg.console:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(
        log_queue, create_console_handler(level, cfg.fmt), respect_handler_level=True
    )
    listener.start()

    root.addHandler(tag_handler(QueueHandler(log_queue)))
    setattr(root, QUEUE_LISTENER_ATTR, listener)
    setattr(root, CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter exit
    atexit.register(_stop_listener, listener)
    return root


def shutdown_logging() -> None:
    """Stop the listener and detach every handler installed by patternlab."""
    root = logging.getLogger()

    listener = getattr(root, QUEUE_LISTENER_ATTR, None)
    _stop_listener(listener)
    setattr(root, QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if is_tagged(h):
            root.removeHandler(h)
            h.close()

    setattr(root, CONFIGURED_FLAG_ATTR, False)


def parse_level(level: Optional[str]) -> int:
    """Map a level name to its numeric value, defaulting to INFO."""
    if not level:
        return logging.INFO
    return LEVELS.get(str(level).strip().upper(), logging.INFO)

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener once and close its handlers; later calls are ignored."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
        for h in listener.handlers:
            h.close()
