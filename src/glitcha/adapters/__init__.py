"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.config` - Configuration loading and display
    * :mod:`.glitch` - Typed ``[glitch]`` settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.terminal` - Print loop, full-screen streams, signal handling
"""

from __future__ import annotations

__all__: list[str] = []
