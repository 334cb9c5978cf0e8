"""Pure domain functions with no I/O or framework dependencies.

Every function takes its random source as an argument. Callers own the
``random.Random`` instance, so a single seeded generator reproduces a whole
run and no module-level generator state is shared between threads.
"""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from typing import Final

from .errors import InvalidLengthRangeError
from .glyphs import COLOR_PALETTE, FALLBACK_COLOR, GLYPH_SET

DEFAULT_MIN_LENGTH: Final[int] = 1
DEFAULT_MAX_LENGTH: Final[int] = 20


def validate_length_range(min_length: int, max_length: int) -> None:
    """Reject glyph count ranges that cannot produce a line.

    Raises:
        InvalidLengthRangeError: If ``min_length < 1`` or ``min_length > max_length``.

    Examples:
        >>> validate_length_range(1, 20)

        >>> validate_length_range(0, 3)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidLengthRangeError: min_length must be at least 1, got 0
    """
    if min_length < 1:
        raise InvalidLengthRangeError(f"min_length must be at least 1, got {min_length}")
    if min_length > max_length:
        raise InvalidLengthRangeError(f"min_length {min_length} exceeds max_length {max_length}")


def choose_glyphs(
    rng: random.Random,
    *,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
    glyphs: Sequence[str] = GLYPH_SET,
) -> list[str]:
    """Draw a random-length run of glyphs, uniformly and with replacement.

    The length is drawn first, uniformly from ``[min_length, max_length]``,
    then each position independently from ``glyphs``.

    Args:
        rng: Random source owned by the caller.
        min_length: Smallest glyph count (inclusive).
        max_length: Largest glyph count (inclusive).
        glyphs: Pool to draw from. Defaults to the fixed glyph set.

    Returns:
        The drawn glyphs in order.

    Raises:
        InvalidLengthRangeError: If the range is empty or starts below one.

    Example:
        >>> picked = choose_glyphs(random.Random(3), min_length=4, max_length=4)
        >>> len(picked)
        4
        >>> all(g in GLYPH_SET for g in picked)
        True
    """
    validate_length_range(min_length, max_length)
    length = rng.randint(min_length, max_length)
    return [rng.choice(glyphs) for _ in range(length)]


def build_glitch_line(
    rng: random.Random,
    *,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    """Return one glitch line: a concatenation of randomly drawn glyphs.

    Example:
        >>> line = build_glitch_line(random.Random(0), min_length=1, max_length=1)
        >>> line in GLYPH_SET
        True
    """
    return "".join(choose_glyphs(rng, min_length=min_length, max_length=max_length))


def iter_glitch_lines(
    rng: random.Random,
    count: int | None = None,
    *,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> Iterator[str]:
    """Yield glitch lines, endlessly when ``count`` is None.

    Example:
        >>> lines = list(iter_glitch_lines(random.Random(1), 3))
        >>> len(lines)
        3
    """
    validate_length_range(min_length, max_length)
    emitted = 0
    while count is None or emitted < count:
        yield build_glitch_line(rng, min_length=min_length, max_length=max_length)
        emitted += 1


def pick_color(rng: random.Random, palette: Sequence[tuple[int, int]] = COLOR_PALETTE) -> int:
    """Pick an ANSI-256 colour index from a weighted palette.

    Args:
        rng: Random source owned by the caller.
        palette: ``(colour, weight)`` pairs. Weights must be non-negative.

    Returns:
        The chosen colour index, or :data:`FALLBACK_COLOR` for an all-zero palette.

    Example:
        >>> pick_color(random.Random(0), [(42, 1)])
        42
        >>> pick_color(random.Random(0), [(42, 0)])
        15
    """
    total = sum(weight for _, weight in palette)
    if total <= 0:
        return FALLBACK_COLOR
    choice = rng.randrange(total)
    for color, weight in palette:
        if choice < weight:
            return color
        choice -= weight
    return FALLBACK_COLOR


__all__ = [
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_MIN_LENGTH",
    "build_glitch_line",
    "choose_glyphs",
    "iter_glitch_lines",
    "pick_color",
    "validate_length_range",
]
