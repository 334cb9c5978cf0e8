"""Console script entry point with production wiring.

Lives at package level so the composition layer can be wired into the
adapters layer without the adapters importing composition themselves.

SIGINT and SIGTERM are routed into a stop event before the CLI stack is
imported. A termination request during startup therefore ends the process
with exit code 0 instead of a default signal death or a ``KeyboardInterrupt``
traceback from deep inside an import.
"""

from __future__ import annotations

import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from functools import partial
from types import FrameType
from typing import Any

STARTUP_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


@contextmanager
def startup_termination_guard() -> Iterator[threading.Event]:
    """Route termination signals into a fresh event until the block ends.

    Previous handlers are put back on exit. Off the main thread nothing is
    installed and the event only changes when set explicitly.

    Example:
        >>> with startup_termination_guard() as stop:
        ...     stop.is_set()
        False
    """
    stop = threading.Event()
    if threading.current_thread() is not threading.main_thread():
        yield stop
        return

    def _handle(signum: int, frame: FrameType | None) -> None:
        stop.set()

    previous: dict[signal.Signals, Any] = {}
    for signum in STARTUP_SIGNALS:
        previous[signum] = signal.signal(signum, _handle)
    try:
        yield stop
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


def main() -> int:
    """Console script entry point with production services wired.

    Returns:
        Exit code from CLI execution, or 0 when a termination request
        arrived before the CLI was ready.
    """
    with startup_termination_guard() as stop:
        from .adapters.cli.main import main as cli_main
        from .composition import build_production

        if stop.is_set():
            return 0
        return cli_main(services_factory=partial(build_production, stop=stop))


__all__ = ["STARTUP_SIGNALS", "main", "startup_termination_guard"]
