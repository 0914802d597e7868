"""Forward the command line to the real package manager."""

from __future__ import annotations

import logging
import os
import platform
import shutil
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger(__name__)

PNPM_NAME = "pnpm"
WIN_DEFAULT_PATHEXT = ".COM;.EXE;.BAT;.CMD;.VBS;.JS;.WS;.MSC"

# Exit status used when the child gives us nothing numeric to propagate
FALLBACK_EXIT_CODE = 1


def is_windows() -> bool:
    return platform.system() == "Windows"


def resolve_command(executable: str, args: Sequence[str]) -> list[str]:
    """Build the argv for the forwarded command.

    The executable is resolved to a concrete path when it can be found on PATH
    (trying each PATHEXT suffix on Windows, where pnpm ships as ``pnpm.cmd``).
    Arguments are appended untouched.
    """
    forwarded = list(args)

    if Path(executable).name != executable:
        return [executable, *forwarded]

    if is_windows():
        pathext = os.environ.get("PATHEXT", WIN_DEFAULT_PATHEXT)
        for ext in pathext.split(";"):
            if ext and (potential_path := shutil.which(executable + ext)):
                return [potential_path, *forwarded]

    if resolved := shutil.which(executable):
        return [resolved, *forwarded]

    return [executable, *forwarded]


def exit_code_from_status(returncode: int | None) -> int:
    """Map a child's return code onto the status this process exits with.

    Signal deaths (negative codes on POSIX) and missing codes become
    ``FALLBACK_EXIT_CODE``.
    """
    if returncode is None or returncode < 0:
        return FALLBACK_EXIT_CODE
    return returncode


def run_forwarded(args: Sequence[str], executable: str = PNPM_NAME) -> int:
    """Run ``executable`` with ``args``, inheriting stdio, and return its exit status."""
    command = resolve_command(executable, args)
    log.debug("Forwarding to %s", command)
    try:
        completed = subprocess.run(command, check=False)
    except OSError as exc:
        log.error("Could not run %s: %s", executable, exc)
        return FALLBACK_EXIT_CODE
    return exit_code_from_status(completed.returncode)


__all__ = [
    "FALLBACK_EXIT_CODE",
    "PNPM_NAME",
    "exit_code_from_status",
    "resolve_command",
    "run_forwarded",
]
