"""Immutable glyph and colour tables shared by every renderer."""

from __future__ import annotations

from typing import Final

#: Decorated variants of the letter "A". Order is fixed; index draws rely on it.
GLYPH_SET: Final[tuple[str, ...]] = (
    "A̵̦̦̓͌͗͛̕",
    "A",
    "₳",
    "░A░",
    "A҉",
    "Ⱥ",
    "A̷",
    "A̲",
    "A̳",
    "A̾",
    "A͎",
    "A͓̽",
    "𝔸",
    "ᴀ",
    "∀",
)

#: Accent colours (ANSI-256 index, weight) used for the full-screen streams.
ACCENT_COLORS: Final[tuple[tuple[int, int], ...]] = (
    (0, 10),
    (18, 10),
    (29, 10),
    (39, 10),
    (128, 10),
    (199, 10),
    (206, 10),
)

#: The dominant colour; carries as much weight as three accents.
PRIMARY_COLOR: Final[tuple[int, int]] = (255, 30)

#: Complete weighted palette in draw order.
COLOR_PALETTE: Final[tuple[tuple[int, int], ...]] = (*ACCENT_COLORS, PRIMARY_COLOR)

#: Fallback when the palette draw runs off the end (never with positive weights).
FALLBACK_COLOR: Final[int] = 15


__all__ = [
    "ACCENT_COLORS",
    "COLOR_PALETTE",
    "FALLBACK_COLOR",
    "GLYPH_SET",
    "PRIMARY_COLOR",
]
