"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol's ``__call__`` matches the signature of the adapter function
that implements it, so plain module-level functions satisfy the ports
structurally. Adapter-owned types are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, TextIO

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config
    from rich.console import Console

    from ..adapters.glitch.settings import GlitchSettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadGlitchSettings(Protocol):
    """Build validated glitch settings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> GlitchSettings: ...


class RunGlitchPrinter(Protocol):
    """Print glitch lines until terminated; return the number of lines printed."""

    def __call__(self, settings: GlitchSettings, *, count: int | None = ..., out: TextIO | None = ...) -> int: ...


class RunGlitchStreams(Protocol):
    """Render full-screen glitch streams until terminated; return frames drawn."""

    def __call__(
        self, settings: GlitchSettings, *, console: Console | None = ..., max_ticks: int | None = ...
    ) -> int: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadGlitchSettings",
    "RunGlitchPrinter",
    "RunGlitchStreams",
]
