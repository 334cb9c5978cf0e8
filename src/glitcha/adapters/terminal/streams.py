"""Full-screen glitch streams rendered with Rich console control codes.

Streams spawn at random cells, drift one cell per tick, and stamp a short
coloured glitch line wherever they are. Control codes are only emitted when
the console is a real terminal, so redirected output stays plain text.

On a terminal, SPACE pauses and resumes the animation and ``q`` quits.
"""

from __future__ import annotations

import logging
import random
import sys
import threading
import time
from typing import Final

from rich.color import Color
from rich.console import Console
from rich.control import Control
from rich.style import Style

from glitcha.adapters.glitch.settings import GlitchSettings
from glitcha.domain.behaviors import build_glitch_line, pick_color
from glitcha.domain.streams import Stream

from .keys import KeySource, TerminalKeys
from .signals import TerminationWatcher

logger = logging.getLogger(__name__)

PAUSE_KEY: Final[str] = " "
QUIT_KEYS: Final[frozenset[str]] = frozenset({"q", "Q"})
PAUSED_BANNER: Final[str] = "*PAUSED* (press [SPACE] to resume, [q] to quit)"


class StreamRenderer:
    """Owns the live streams and draws one frame per :meth:`tick`.

    Example:
        >>> import io
        >>> console = Console(file=io.StringIO(), width=40, height=10)
        >>> renderer = StreamRenderer(GlitchSettings(stream_chaos=1.0, seed=1), console=console)
        >>> renderer.tick()
        True
        >>> len(renderer.streams)
        1
    """

    def __init__(self, settings: GlitchSettings, *, console: Console, rng: random.Random | None = None) -> None:
        self._settings = settings
        self._console = console
        self._rng = rng if rng is not None else random.Random(settings.seed)
        self.streams: list[Stream] = []
        self.paused = threading.Event()

    def tick(self) -> bool:
        """Maybe spawn a stream, advance all streams, and draw them.

        Returns:
            False when paused and nothing was drawn.
        """
        if self.paused.is_set():
            return False
        rng = self._rng
        width, height = self._console.size
        if rng.random() < self._settings.stream_chaos:
            self.streams.append(Stream.spawn(rng, width, height))

        self.streams = [stream.advance(rng, width, height) for stream in self.streams]
        for stream in self.streams:
            self._draw(stream)
        self._console.file.flush()

        overflow = len(self.streams) - self._settings.max_streams
        if overflow > 0:
            del self.streams[:overflow]
        return True

    def _draw(self, stream: Stream) -> None:
        text = build_glitch_line(self._rng, min_length=1, max_length=self._settings.stream_max_length)
        style = Style(color=Color.from_ansi(pick_color(self._rng)))
        self._console.control(Control.move_to(stream.x, stream.y))
        self._print(text, style=style)

    def _print(self, text: str, *, style: Style | None = None) -> None:
        self._console.print(text, style=style, end="", soft_wrap=True, markup=False, emoji=False, highlight=False)

    def toggle_pause(self) -> None:
        """Pause, stamping the banner in the top-left corner, or resume."""
        if self.paused.is_set():
            self.paused.clear()
            return
        self.paused.set()
        self._console.control(Control.move_to(0, 0))
        self._print(PAUSED_BANNER)
        self._console.file.flush()

    def hide_cursor(self) -> None:
        self._console.show_cursor(False)

    def restore(self) -> None:
        """Clear the screen, home and show the cursor.

        Every styled segment already closes with an SGR reset, so no colour
        carries over into the shell.
        """
        self._console.clear()
        self._console.show_cursor(True)


def handle_key(key: str, *, renderer: StreamRenderer, stop: threading.Event) -> None:
    """Apply one key press: SPACE toggles pause, ``q``/``Q`` requests a stop."""
    if key in QUIT_KEYS:
        logger.debug("Quit key pressed")
        stop.set()
    elif key == PAUSE_KEY:
        renderer.toggle_pause()
        logger.debug("Pause toggled", extra={"paused": renderer.paused.is_set()})


def run_glitch_streams(
    settings: GlitchSettings,
    *,
    console: Console | None = None,
    max_ticks: int | None = None,
    keys: KeySource | None = None,
    stop: threading.Event | None = None,
) -> int:
    """Render glitch streams until ``q``, SIGINT/SIGTERM, or ``max_ticks`` frames.

    Args:
        settings: Validated settings; the ``stream_*`` fields drive this mode.
        console: Target console. Defaults to a Rich console on stdout.
        max_ticks: Optional frame budget after which to stop on its own.
        keys: Key reader. Defaults to stdin when the console is a terminal.
        stop: Event shared with handlers installed earlier in the process;
            a request already recorded there ends the run before the first frame.

    Returns:
        Number of frames drawn. Paused ticks do not count.
    """
    target = console if console is not None else Console(highlight=False)
    key_source = keys if keys is not None else TerminalKeys(sys.stdin if target.is_terminal else None)
    renderer = StreamRenderer(settings, console=target)
    interval = settings.stream_interval_seconds
    ticks = 0
    with TerminationWatcher(event=stop) as watcher, key_source:
        logger.info(
            "Starting glitch streams",
            extra={"chaos": settings.stream_chaos, "max_streams": settings.max_streams},
        )
        renderer.hide_cursor()
        try:
            while not watcher.stopped and (max_ticks is None or ticks < max_ticks):
                if renderer.tick():
                    ticks += 1
                started = time.monotonic()
                key = key_source.read_key(interval)
                if key is not None:
                    handle_key(key, renderer=renderer, stop=watcher.event)
                if watcher.event.wait(max(0.0, interval - (time.monotonic() - started))):
                    break
        finally:
            renderer.restore()
        logger.info("Glitch streams stopped", extra={"frames": ticks, "signal": watcher.signal_name()})
    return ticks


__all__ = [
    "PAUSED_BANNER",
    "StreamRenderer",
    "handle_key",
    "run_glitch_streams",
]
