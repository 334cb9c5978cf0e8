"""Background glitch print loop and its blocking driver.

The print loop runs on its own daemon thread and is the only user of its
``random.Random`` instance. The calling thread blocks on the termination
watcher's event; the loop sleeps on that same event so a stop request ends
it within one emission.

Contents:
    * :class:`GlitchPrinter` - Thread-backed emission loop.
    * :func:`run_glitch_printer` - Run until a termination request (or ``count`` lines).
"""

from __future__ import annotations

import logging
import random
import sys
import threading
from typing import Final, TextIO

from glitcha.adapters.glitch.settings import GlitchSettings
from glitcha.domain.behaviors import build_glitch_line, validate_length_range

from .signals import TerminationWatcher

logger = logging.getLogger(__name__)

#: How long to wait for the loop thread after a stop; a loop stuck in a
#: blocking write is left to die with the process.
JOIN_TIMEOUT_SECONDS: Final[float] = 1.0


class GlitchPrinter:
    """Emit glitch lines on a background thread until stopped.

    Args:
        settings: Interval and length bounds.
        stop: Event that ends the loop; also set by the loop when it finishes
            on its own (``count`` reached or a write failed).
        out: Text stream to write to. Defaults to ``sys.stdout`` at start time.
        rng: Random source used exclusively by the loop thread.
        count: Emit exactly this many lines, or loop forever when None.

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> printer = GlitchPrinter(GlitchSettings(interval_ms=1), stop=threading.Event(), out=buffer, count=2)
        >>> printer.start()
        >>> printer.join()
        >>> printer.lines_emitted
        2
    """

    def __init__(
        self,
        settings: GlitchSettings,
        *,
        stop: threading.Event,
        out: TextIO | None = None,
        rng: random.Random | None = None,
        count: int | None = None,
    ) -> None:
        validate_length_range(settings.min_length, settings.max_length)
        self._settings = settings
        self._stop = stop
        self._out = out
        self._rng = rng if rng is not None else random.Random(settings.seed)
        self._count = count
        self._thread: threading.Thread | None = None
        self.lines_emitted = 0
        self.error: Exception | None = None

    def start(self) -> None:
        out = self._out if self._out is not None else sys.stdout
        self._thread = threading.Thread(target=self._loop, args=(out,), name="glitch-printer", daemon=True)
        self._thread.start()

    def _loop(self, out: TextIO) -> None:
        settings = self._settings
        try:
            while not self._stop.is_set():
                line = build_glitch_line(self._rng, min_length=settings.min_length, max_length=settings.max_length)
                out.write(line + "\n")
                out.flush()
                self.lines_emitted += 1
                if self._count is not None and self.lines_emitted >= self._count:
                    break
                if self._stop.wait(settings.interval_seconds):
                    break
        except Exception as exc:
            self.error = exc
        finally:
            self._stop.set()

    def join(self, timeout: float | None = JOIN_TIMEOUT_SECONDS) -> None:
        """Wait for the loop thread, then surface any error it hit.

        Raises:
            Exception: Whatever the loop raised while writing (e.g. ``BrokenPipeError``).
        """
        if self._thread is not None:
            self._thread.join(timeout)
        if self.error is not None:
            raise self.error


def run_glitch_printer(
    settings: GlitchSettings,
    *,
    count: int | None = None,
    out: TextIO | None = None,
    stop: threading.Event | None = None,
) -> int:
    """Print glitch lines until SIGINT/SIGTERM arrives or ``count`` lines are out.

    Installs the termination handlers, starts the print loop, and blocks the
    calling thread on the shared stop event.

    Args:
        settings: Validated printer settings; ``settings.seed`` seeds the loop.
        count: Optional number of lines after which to stop on its own.
        out: Text stream to write to. Defaults to ``sys.stdout``.
        stop: Event shared with handlers installed earlier in the process. A
            request already recorded there ends the run before the first line.

    Returns:
        Number of lines emitted.

    Raises:
        Exception: Any error raised by the print loop while writing.
    """
    with TerminationWatcher(event=stop) as watcher:
        printer = GlitchPrinter(settings, stop=watcher.event, out=out, count=count)
        logger.info(
            "Starting glitch printer",
            extra={
                "interval_ms": settings.interval_ms,
                "min_length": settings.min_length,
                "max_length": settings.max_length,
            },
        )
        printer.start()
        watcher.wait()
        printer.join()
        logger.info(
            "Glitch printer stopped",
            extra={"lines": printer.lines_emitted, "signal": watcher.signal_name()},
        )
    return printer.lines_emitted


__all__ = [
    "GlitchPrinter",
    "JOIN_TIMEOUT_SECONDS",
    "run_glitch_printer",
]
