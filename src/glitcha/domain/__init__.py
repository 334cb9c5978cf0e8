"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.glyphs` - The fixed glyph set and colour palette
    * :mod:`.behaviors` - Glitch line and colour draws
    * :mod:`.streams` - Drifting streams for the full-screen mode
    * :mod:`.enums` - Domain enumerations (OutputFormat, Direction)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    build_glitch_line,
    choose_glyphs,
    iter_glitch_lines,
    pick_color,
    validate_length_range,
)
from .enums import Direction, OutputFormat
from .errors import InvalidLengthRangeError
from .glyphs import COLOR_PALETTE, GLYPH_SET
from .streams import Stream

__all__ = [
    # Tables
    "COLOR_PALETTE",
    "GLYPH_SET",
    # Behaviors
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_MIN_LENGTH",
    "build_glitch_line",
    "choose_glyphs",
    "iter_glitch_lines",
    "pick_color",
    "validate_length_range",
    # Streams
    "Stream",
    # Enums
    "Direction",
    "OutputFormat",
    # Errors
    "InvalidLengthRangeError",
]
