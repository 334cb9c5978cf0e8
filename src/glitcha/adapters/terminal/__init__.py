"""Terminal adapter - print loop, full-screen streams, keys, and signal handling.

Contents:
    * :mod:`.printer` - Background glitch print loop
    * :mod:`.streams` - Full-screen coloured streams with pause/quit keys
    * :mod:`.keys` - Single-key terminal input
    * :mod:`.signals` - SIGINT/SIGTERM routed into a stop event
"""

from __future__ import annotations

from .keys import KeySource, TerminalKeys
from .printer import GlitchPrinter, run_glitch_printer
from .signals import TERMINATION_SIGNALS, TerminationWatcher
from .streams import StreamRenderer, handle_key, run_glitch_streams

__all__ = [
    "GlitchPrinter",
    "KeySource",
    "StreamRenderer",
    "TERMINATION_SIGNALS",
    "TerminalKeys",
    "TerminationWatcher",
    "handle_key",
    "run_glitch_printer",
    "run_glitch_streams",
]
