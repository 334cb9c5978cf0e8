"""In-memory glitch runners for testing.

Contents:
    * :class:`GlitchSpy` - Records printer/streams calls and prints a bounded
      number of lines instead of waiting for a termination signal.
"""

from __future__ import annotations

import random
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TextIO

from rich.console import Console

from ...domain.behaviors import iter_glitch_lines
from ..glitch.settings import GlitchSettings


def _empty_call_list() -> list[dict[str, Any]]:
    """Create an empty typed list for call records."""
    return []


@dataclass
class GlitchSpy:
    """Captures glitch runs for test assertions.

    ``run_glitch_printer`` writes real glitch lines, but stops after
    ``count`` lines (or ``unbounded_lines`` when no count was requested)
    rather than waiting for SIGINT/SIGTERM.

    Attributes:
        printer_calls: Captured ``run_glitch_printer`` calls.
        stream_calls: Captured ``run_glitch_streams`` calls.
        unbounded_lines: Lines to print when the caller asked for an endless run.
        raise_exception: When set, both runners raise it after recording.

    Example:
        >>> import io
        >>> spy = GlitchSpy()
        >>> spy.run_glitch_printer(GlitchSettings(seed=1), count=2, out=io.StringIO())
        2
        >>> spy.printer_calls[0]["count"]
        2
    """

    printer_calls: list[dict[str, Any]] = field(default_factory=_empty_call_list)
    stream_calls: list[dict[str, Any]] = field(default_factory=_empty_call_list)
    unbounded_lines: int = 3
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.printer_calls.clear()
        self.stream_calls.clear()
        self.raise_exception = None

    def run_glitch_printer(
        self,
        settings: GlitchSettings,
        *,
        count: int | None = None,
        out: TextIO | None = None,
    ) -> int:
        """Record the call and print a bounded batch of lines."""
        self.printer_calls.append({"settings": settings, "count": count})
        if self.raise_exception is not None:
            raise self.raise_exception
        target = out if out is not None else sys.stdout
        lines = count if count is not None else self.unbounded_lines
        rng = random.Random(settings.seed)
        for line in iter_glitch_lines(rng, lines, min_length=settings.min_length, max_length=settings.max_length):
            target.write(line + "\n")
        return lines

    def run_glitch_streams(
        self,
        settings: GlitchSettings,
        *,
        console: Console | None = None,
        max_ticks: int | None = None,
    ) -> int:
        """Record the call without drawing anything."""
        self.stream_calls.append({"settings": settings, "max_ticks": max_ticks})
        if self.raise_exception is not None:
            raise self.raise_exception
        return max_ticks if max_ticks is not None else 0


def load_glitch_settings_from_dict_in_memory(config_dict: Mapping[str, Any]) -> GlitchSettings:
    """Parse glitch settings from dict using the real Pydantic model."""
    glitch_raw = config_dict.get("glitch", {})
    return GlitchSettings.model_validate(glitch_raw if glitch_raw else {})


__all__ = [
    "GlitchSpy",
    "load_glitch_settings_from_dict_in_memory",
]
