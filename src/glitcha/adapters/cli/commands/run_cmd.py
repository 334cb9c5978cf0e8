"""Run command - print glitch lines until SIGINT/SIGTERM.

Contents:
    * :func:`cli_run` - The classic endless glitch printer.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import glitch_options, resolve_settings

logger = logging.getLogger(__name__)


@click.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@glitch_options
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=None,
    help="Stop on its own after this many lines instead of waiting for Ctrl+C",
)
@click.pass_context
def cli_run(
    ctx: click.Context,
    seed: int | None,
    min_length: int | None,
    max_length: int | None,
    interval_ms: int | None,
    count: int | None,
) -> None:
    """Print a line of glitched A's every 100 ms until interrupted.

    Stops cleanly with exit code 0 on Ctrl+C (SIGINT) or SIGTERM.
    """
    cli_ctx = get_cli_context(ctx)
    settings = resolve_settings(
        cli_ctx, seed=seed, min_length=min_length, max_length=max_length, interval_ms=interval_ms
    )
    with lib_log_rich.runtime.bind(job_id="cli-run", extra={"command": "run", "seed": settings.seed}):
        lines = cli_ctx.services.run_glitch_printer(settings, count=count)
        logger.info("Run finished", extra={"lines": lines})


__all__ = ["cli_run"]
