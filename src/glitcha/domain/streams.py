"""Drifting cursor streams for the full-screen glitch mode."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Final

from .enums import Direction

#: Chance per tick that a stream turns even when nowhere near an edge.
TURN_PROBABILITY: Final[float] = 0.1


def random_direction(rng: random.Random) -> Direction:
    """Pick one of the eight directions uniformly."""
    return rng.choice(list(Direction))


@dataclass(frozen=True, slots=True)
class Stream:
    """A cursor that wanders over the screen, one cell per tick.

    Attributes:
        x: Column, zero-based.
        y: Row, zero-based. Not bounded below the screen so output can scroll.
        direction: Current drift direction.

    Example:
        >>> s = Stream(x=5, y=5, direction=Direction.RIGHT)
        >>> s.advance(random.Random(1), max_x=80, max_y=24).x in (5, 6)
        True
    """

    x: int
    y: int
    direction: Direction

    @classmethod
    def spawn(cls, rng: random.Random, max_x: int, max_y: int) -> Stream:
        """Create a stream at a random on-screen cell with a random heading."""
        return cls(
            x=rng.randrange(max(max_x, 1)),
            y=rng.randrange(max(max_y, 1)),
            direction=random_direction(rng),
        )

    def advance(self, rng: random.Random, max_x: int, max_y: int) -> Stream:
        """Return the stream one tick later.

        A stream that would touch the left, right, or top edge (or that
        randomly decides to turn) keeps its cell, picks a new heading, and is
        clamped back inside the margins. Otherwise it moves by its offset.
        ``max_y`` is accepted for symmetry with :meth:`spawn`; rows are only
        bounded at the top.
        """
        dx, dy = self.direction.offset
        new_x = self.x + dx
        new_y = self.y + dy

        hits_edge = new_x <= 0 or new_x >= max_x - 2 or new_y <= 0
        if hits_edge or rng.random() < TURN_PROBABILITY:
            x, y = self.x, self.y
            if new_x <= 0:
                x = 1
            if new_x >= max_x - 1:
                x = max_x - 2
            if new_y <= 0:
                y = 1
            return replace(self, x=x, y=y, direction=random_direction(rng))

        return replace(self, x=new_x, y=new_y)


__all__ = [
    "TURN_PROBABILITY",
    "Stream",
    "random_direction",
]
