"""Type-safe domain enums for output formats and stream directions."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class Direction(Enum):
    """Compass direction a glitch stream drifts in.

    Each member's value is the ``(dx, dy)`` cell offset applied per tick,
    with ``y`` growing downwards like terminal rows.

    Example:
        >>> Direction.UP_LEFT.offset
        (-1, -1)
        >>> len(Direction)
        8
    """

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (1, -1)
    DOWN_LEFT = (-1, 1)
    DOWN_RIGHT = (1, 1)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value


__all__ = [
    "Direction",
    "OutputFormat",
]
