"""Termination signal handling backed by a single ``threading.Event``.

SIGINT and SIGTERM handlers all fulfil the same event, so the main thread can
block on one notification primitive regardless of which signal arrived.

Contents:
    * :data:`TERMINATION_SIGNALS` - Signals treated as a stop request.
    * :class:`TerminationWatcher` - Context manager installing the handlers.
"""

from __future__ import annotations

import logging
import signal
import threading
from collections.abc import Iterable
from types import FrameType, TracebackType
from typing import Any, Final

logger = logging.getLogger(__name__)

TERMINATION_SIGNALS: Final[tuple[signal.Signals, ...]] = (signal.SIGINT, signal.SIGTERM)

#: Upper bound for a single blocking wait; keeps the main thread responsive
#: on platforms where lock waits are not interrupted by signals.
WAIT_POLL_SECONDS: Final[float] = 0.25


class TerminationWatcher:
    """Route termination signals into a stop event for the duration of a block.

    Handlers are only installed from the main thread (the only thread Python
    allows to do so). Elsewhere the watcher still works as a plain stop event
    that callers set through :meth:`request_stop`.

    Attributes:
        event: Set once a termination request arrives or a stop is requested.
        received: The signal number that triggered the stop, if any.

    Example:
        >>> with TerminationWatcher() as watcher:
        ...     watcher.request_stop()
        ...     watcher.wait()
        >>> watcher.event.is_set()
        True
    """

    def __init__(
        self,
        signals: Iterable[signal.Signals] = TERMINATION_SIGNALS,
        *,
        event: threading.Event | None = None,
    ) -> None:
        self._signals = tuple(signals)
        self.event = event if event is not None else threading.Event()
        self.received: int | None = None
        self._previous: dict[signal.Signals, Any] = {}

    def __enter__(self) -> TerminationWatcher:
        if threading.current_thread() is not threading.main_thread():
            logger.debug("Not on the main thread; termination signals stay with their current handlers")
            return self
        for signum in self._signals:
            self._previous[signum] = signal.signal(signum, self._handle)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        for signum, previous in self._previous.items():
            signal.signal(signum, previous)
        self._previous.clear()

    def _handle(self, signum: int, frame: FrameType | None) -> None:
        if self.received is None:
            self.received = signum
        self.event.set()

    def request_stop(self) -> None:
        """Stop without a signal, e.g. when the work ran to completion."""
        self.event.set()

    @property
    def stopped(self) -> bool:
        return self.event.is_set()

    def wait(self) -> None:
        """Block until a termination request or :meth:`request_stop`."""
        while not self.event.wait(WAIT_POLL_SECONDS):
            pass

    def signal_name(self) -> str | None:
        """Return the name of the received signal, e.g. ``'SIGTERM'``."""
        if self.received is None:
            return None
        return signal.Signals(self.received).name


__all__ = [
    "TERMINATION_SIGNALS",
    "TerminationWatcher",
    "WAIT_POLL_SECONDS",
]
