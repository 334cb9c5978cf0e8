"""Per-invocation CLI state and the process-wide traceback switches.

The root group loads configuration and services once and parks them on
``ctx.obj`` as a :class:`CLIContext`; subcommands read them back through
:func:`get_cli_context`. Traceback rendering lives in
``lib_cli_exit_tools.config`` and is toggled, snapshotted, and restored here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from glitcha.composition import AppServices

TracebackState = tuple[bool, bool]
"""``(traceback, traceback_force_color)`` as read from lib_cli_exit_tools."""


@dataclass(slots=True)
class CLIContext:
    """State the root group hands to every subcommand.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Merged configuration with root ``--set`` overrides applied.
        services: Wired ports from the composition root.
        profile: Root ``--profile`` value, if any.
        set_overrides: Raw ``--set`` strings for commands that reload another profile.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with the resolved CLIContext."""
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext stored by the root group.

    Raises:
        RuntimeError: A subcommand ran without the root group having set up state.
    """
    state = ctx.obj
    if not isinstance(state, CLIContext):
        raise RuntimeError("CLI context missing: subcommands must run under the glitcha root group.")
    return state


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for lib_cli_exit_tools.

    Example:
        >>> previous = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        (True, True)
        >>> restore_traceback_state(previous)
    """
    config = lib_cli_exit_tools.config
    config.traceback = bool(enabled)
    config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return (
        bool(getattr(config, "traceback", False)),
        bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Put back flags captured by :func:`snapshot_traceback_state`."""
    traceback, force_color = state
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
