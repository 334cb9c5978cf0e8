"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports: no filesystem, no
signal handlers, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.glitch` - GlitchSpy runners and settings loader
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
)
from .glitch import GlitchSpy, load_glitch_settings_from_dict_in_memory
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from glitcha.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadGlitchSettings,
        RunGlitchPrinter,
        RunGlitchStreams,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_glitch_settings: LoadGlitchSettings = load_glitch_settings_from_dict_in_memory
    _assert_run_glitch_printer: RunGlitchPrinter = GlitchSpy().run_glitch_printer
    _assert_run_glitch_streams: RunGlitchStreams = GlitchSpy().run_glitch_streams
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "GlitchSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_glitch_settings_from_dict_in_memory",
]
