"""Terminal geometry helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)

DEFAULT_TERMINAL_WIDTH = 80


def get_terminal_width(stream: TextIO | None = None) -> int:
    """Get the column count of the terminal attached to ``stream``.

    Falls back to ``DEFAULT_TERMINAL_WIDTH`` when the stream is not a terminal,
    has no file descriptor, or reports a zero width (some CI pseudo-terminals).

    Args:
        stream: Stream to inspect. Defaults to ``sys.stdout``.

    Returns:
        Width in columns, always positive.
    """
    target = sys.stdout if stream is None else stream
    try:
        columns = os.get_terminal_size(target.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return DEFAULT_TERMINAL_WIDTH
    return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH


def safe_width(provider: Callable[[], object]) -> int:
    """Call a width provider, substituting the default on any failure."""
    try:
        width = provider()
    except Exception as exc:
        log.debug("Terminal width query failed: %s", exc)
        return DEFAULT_TERMINAL_WIDTH
    # bool is an int subclass but never a width
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        return DEFAULT_TERMINAL_WIDTH
    return width


__all__ = ["DEFAULT_TERMINAL_WIDTH", "get_terminal_width", "safe_width"]
