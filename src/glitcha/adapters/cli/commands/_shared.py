"""Shared helpers for the glitch commands (run, sample, streams).

Contains the common option decorator and the settings resolution that maps
validation failures onto exit codes.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, NoReturn

import rich_click as click
from pydantic import ValidationError

from glitcha.adapters.glitch.settings import GlitchSettings, apply_settings_overrides

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def line_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the seed and glyph count options used by ``run`` and ``sample``.

    Each option defaults to ``None`` so an omitted flag leaves the
    configured value in place.
    """
    options = [
        click.option("--seed", type=int, default=None, help="Seed the random source for a reproducible sequence"),
        click.option("--min-length", type=int, default=None, help="Fewest glyphs per line (default 1)"),
        click.option("--max-length", type=int, default=None, help="Most glyphs per line (default 20)"),
    ]
    return functools.reduce(lambda f, opt: opt(f), reversed(options), func)


def glitch_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add :func:`line_options` plus ``--interval-ms`` for the timed printer."""
    interval = click.option(
        "--interval-ms", type=int, default=None, help="Pause between lines in milliseconds (default 100)"
    )
    return line_options(interval(func))


def _fail(message: str, exc: ValidationError, exit_code: ExitCode) -> NoReturn:
    logger.error(message, extra={"errors": exc.error_count()})
    click.echo(f"\nError: {message} - {exc}", err=True)
    raise SystemExit(exit_code) from exc


def resolve_settings(cli_ctx: CLIContext, **overrides: Any) -> GlitchSettings:
    """Load ``[glitch]`` settings and layer the command-line options on top.

    Args:
        cli_ctx: CLI context holding the merged configuration and services.
        **overrides: Option values; ``None`` means "not given".

    Returns:
        Validated settings.

    Raises:
        SystemExit: ``CONFIG_ERROR`` (78) when the configuration itself is
            invalid, ``INVALID_ARGUMENT`` (22) when an option value is.
    """
    try:
        settings = cli_ctx.services.load_glitch_settings(cli_ctx.config.as_dict())
    except ValidationError as exc:
        _fail("Invalid [glitch] configuration", exc, ExitCode.CONFIG_ERROR)

    try:
        return apply_settings_overrides(settings, overrides)
    except ValidationError as exc:
        _fail("Invalid option value", exc, ExitCode.INVALID_ARGUMENT)


__all__ = [
    "glitch_options",
    "line_options",
    "resolve_settings",
]
