"""Single-key input for the full-screen streams mode.

:class:`TerminalKeys` switches stdin into cbreak mode (no echo, no line
buffering, Ctrl+C still raises SIGINT) and polls it with ``select``. When
stdin is not a terminal, or on Windows, it stays inactive and never reports
a key, so redirected or piped runs behave exactly as before.

Contents:
    * :class:`KeySource` - What the streams loop needs from a key reader.
    * :class:`TerminalKeys` - POSIX terminal implementation.
"""

from __future__ import annotations

import logging
import os
import select
import sys
from types import TracebackType
from typing import Any, Protocol, TextIO

logger = logging.getLogger(__name__)


class KeySource(Protocol):
    """Context manager yielding single key presses."""

    def __enter__(self) -> KeySource: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    def read_key(self, timeout: float) -> str | None:
        """Return the next key pressed within ``timeout`` seconds, else None."""
        ...


class TerminalKeys:
    """Read keys from a terminal stream while the block is active.

    Args:
        stream: Usually ``sys.stdin``. ``None`` or a non-terminal stream
            leaves the reader inactive.

    Example:
        >>> import io
        >>> with TerminalKeys(io.StringIO()) as keys:
        ...     keys.active, keys.read_key(0.0)
        (False, None)
    """

    def __init__(self, stream: TextIO | None) -> None:
        self._stream = stream
        self._fd: int | None = None
        self._saved: list[Any] | None = None
        self._exhausted = False

    @property
    def active(self) -> bool:
        return self._fd is not None and not self._exhausted

    def __enter__(self) -> TerminalKeys:
        stream = self._stream
        if sys.platform == "win32" or stream is None or not stream.isatty():
            return self

        import termios
        import tty

        fd = stream.fileno()
        self._saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        self._fd = fd
        logger.debug("Keyboard controls enabled", extra={"fd": fd})
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._fd is None or self._saved is None:
            return

        import termios

        termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        self._fd = None
        self._saved = None
        self._exhausted = False

    def read_key(self, timeout: float) -> str | None:
        """Wait up to ``timeout`` seconds for one key; inactive readers return at once."""
        fd = self._fd
        if fd is None or self._exhausted:
            return None
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        data = os.read(fd, 1)
        if not data:
            # EOF: the terminal went away, stop polling it.
            self._exhausted = True
            return None
        return data.decode("utf-8", errors="ignore") or None


__all__ = [
    "KeySource",
    "TerminalKeys",
]
