"""Composition root wiring adapters to application ports."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Glitch services
from ..adapters.glitch.settings import load_glitch_settings_from_dict

# Logging services
from ..adapters.logging.setup import init_logging
from ..adapters.terminal.printer import run_glitch_printer
from ..adapters.terminal.streams import run_glitch_streams

# Static conformance assertions - pyright verifies that each adapter function
# structurally satisfies its Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.glitch import GlitchSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadGlitchSettings,
        RunGlitchPrinter,
        RunGlitchStreams,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_glitch_settings: LoadGlitchSettings = load_glitch_settings_from_dict
    _assert_run_glitch_printer: RunGlitchPrinter = run_glitch_printer
    _assert_run_glitch_streams: RunGlitchStreams = run_glitch_streams
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_glitch_settings: LoadGlitchSettings
    run_glitch_printer: RunGlitchPrinter
    run_glitch_streams: RunGlitchStreams
    init_logging: InitLogging


def build_production(*, stop: threading.Event | None = None) -> AppServices:
    """Wire production adapters into an AppServices container.

    Args:
        stop: Termination event installed by the console entry point before
            the CLI stack was imported. Both runners watch it, so a signal
            that arrived during startup ends them before any output.
    """
    printer: RunGlitchPrinter = run_glitch_printer
    streams: RunGlitchStreams = run_glitch_streams
    if stop is not None:
        printer = partial(run_glitch_printer, stop=stop)
        streams = partial(run_glitch_streams, stop=stop)
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_glitch_settings=load_glitch_settings_from_dict,
        run_glitch_printer=printer,
        run_glitch_streams=streams,
        init_logging=init_logging,
    )


def build_testing(*, spy: GlitchSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional GlitchSpy for asserting on printer/streams runs. A fresh
            one is created when None.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        GlitchSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_glitch_settings_from_dict_in_memory,
    )

    glitch_spy = spy if spy is not None else GlitchSpy()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_glitch_settings=load_glitch_settings_from_dict_in_memory,
        run_glitch_printer=glitch_spy.run_glitch_printer,
        run_glitch_streams=glitch_spy.run_glitch_streams,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    # Glitch
    "load_glitch_settings_from_dict",
    "run_glitch_printer",
    "run_glitch_streams",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
