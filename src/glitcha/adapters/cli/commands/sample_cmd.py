"""Sample command - print a fixed number of glitch lines immediately."""

from __future__ import annotations

import logging
import random

import lib_log_rich.runtime
import rich_click as click

from glitcha.domain.behaviors import iter_glitch_lines

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import line_options, resolve_settings

logger = logging.getLogger(__name__)


@click.command("sample", context_settings=CLICK_CONTEXT_SETTINGS)
@line_options
@click.option("--count", type=click.IntRange(min=0), default=1, show_default=True, help="Number of lines to print")
@click.pass_context
def cli_sample(
    ctx: click.Context,
    seed: int | None,
    min_length: int | None,
    max_length: int | None,
    count: int,
) -> None:
    """Print COUNT glitch lines at once, without pausing or waiting for a signal.

    Example:
        >>> from click.testing import CliRunner
        >>> from glitcha.adapters.cli.root import cli
        >>> from glitcha.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["sample", "--count", "2"], obj=build_testing)
        >>> len(result.output.splitlines())
        2
    """
    cli_ctx = get_cli_context(ctx)
    settings = resolve_settings(cli_ctx, seed=seed, min_length=min_length, max_length=max_length)
    with lib_log_rich.runtime.bind(job_id="cli-sample", extra={"command": "sample", "count": count}):
        logger.info("Sampling glitch lines", extra={"seed": settings.seed})
        rng = random.Random(settings.seed)
        for line in iter_glitch_lines(rng, count, min_length=settings.min_length, max_length=settings.max_length):
            click.echo(line)


__all__ = ["cli_sample"]
