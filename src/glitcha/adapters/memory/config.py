"""Configuration ports backed by nothing: no files, no environment."""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Every call yields an empty Config, so ``[glitch]`` falls back to its defaults."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Render nothing."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
