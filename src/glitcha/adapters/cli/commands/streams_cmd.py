"""Streams command - full-screen drifting glitch streams."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import resolve_settings

logger = logging.getLogger(__name__)


@click.command("streams", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--seed", type=int, default=None, help="Seed the random source for a reproducible animation")
@click.option(
    "--chaos",
    "stream_chaos",
    type=float,
    default=None,
    help="Chance per frame that a new stream appears, 0.0 to 1.0 (default 0.2)",
)
@click.option("--max-streams", type=int, default=None, help="Streams kept on screen at once (default 20)")
@click.option(
    "--frames",
    type=click.IntRange(min=1),
    default=None,
    help="Stop on its own after this many frames instead of waiting for Ctrl+C",
)
@click.pass_context
def cli_streams(
    ctx: click.Context,
    seed: int | None,
    stream_chaos: float | None,
    max_streams: int | None,
    frames: int | None,
) -> None:
    """Paint coloured glitch streams across the whole terminal until interrupted.

    On a terminal, SPACE pauses and resumes and q quits. The screen is
    cleared and the cursor restored on q, Ctrl+C (SIGINT) or SIGTERM.
    """
    cli_ctx = get_cli_context(ctx)
    settings = resolve_settings(cli_ctx, seed=seed, stream_chaos=stream_chaos, max_streams=max_streams)
    with lib_log_rich.runtime.bind(job_id="cli-streams", extra={"command": "streams", "seed": settings.seed}):
        drawn = cli_ctx.services.run_glitch_streams(settings, max_ticks=frames)
        logger.info("Streams finished", extra={"frames": drawn})


__all__ = ["cli_streams"]
