"""CLI entry point for pnpm-car."""

from __future__ import annotations

# Python version check - must be before any imports that use 3.12+ syntax.
import sys

if sys.version_info < (3, 12):  # noqa: UP036
    print("Error: pnpm-car requires Python 3.12 or higher.")
    print(
        "You are running Python {}.{}".format(  # noqa: UP032
            sys.version_info.major, sys.version_info.minor
        )
    )
    sys.exit(1)

import asyncio  # noqa: E402
import logging  # noqa: E402

import click  # noqa: E402

from pnpm_car.animation import run as run_animation  # noqa: E402
from pnpm_car.config import RunnerConfig  # noqa: E402
from pnpm_car.debug_log import setup_logging  # noqa: E402
from pnpm_car.runner import run_forwarded  # noqa: E402
from pnpm_car.version import get_version  # noqa: E402

log = logging.getLogger(__name__)


class ForwardingCommand(click.Command):
    """Command that leaves every argument, ``--help`` and ``--`` included, for pnpm."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return []


def play_animation() -> None:
    """Run the car animation, abandoning it on any error."""
    try:
        asyncio.run(run_animation())
    except Exception:
        # Cosmetic only; the user's command still runs
        log.debug("Animation abandoned", exc_info=True)


@click.command(cls=ForwardingCommand, context_settings={"help_option_names": []})
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Play the car animation, then run pnpm with the given arguments."""
    config = RunnerConfig.from_env()
    setup_logging(config.debug)
    log.debug("pnpm-car %s forwarding to %s", get_version(), config.executable)

    if not config.skip_animation:
        play_animation()

    ctx.exit(run_forwarded(ctx.args, executable=config.executable))


def main() -> None:
    # Arguments belong to pnpm, so click must not glob-expand them on Windows
    cli(prog_name="pnpm-car", windows_expand_args=False)


if __name__ == "__main__":
    main()
