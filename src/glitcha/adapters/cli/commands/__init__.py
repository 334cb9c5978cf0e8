"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Glitch commands from :mod:`.run_cmd`, :mod:`.sample_cmd`, :mod:`.streams_cmd`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .run_cmd import cli_run
from .sample_cmd import cli_sample
from .streams_cmd import cli_streams

__all__ = [
    "cli_config",
    "cli_info",
    "cli_run",
    "cli_sample",
    "cli_streams",
]
