"""Diagnostic logging to stderr.

Standard output belongs to the animation and the forwarded command, so all
log records go through a rich handler bound to a stderr console.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "pnpm_car"

_logging_initialized: bool = False


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach the stderr handler to the package logger.

    This is idempotent - later calls only adjust the level.
    """
    global _logging_initialized

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if _logging_initialized:
        return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=debug,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    _logging_initialized = True
    logger.debug("Debug logging initialized")
    return logger


def reset_logging() -> None:
    """Detach handlers installed by setup_logging(). Intended for testing."""
    global _logging_initialized

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    _logging_initialized = False


__all__ = ["LOGGER_NAME", "reset_logging", "setup_logging"]
