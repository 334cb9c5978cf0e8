"""Public package surface exposing the glyph set and line builder.

Imports are routed through the architectural layers:
- Domain exports: the glyph set and glitch line builder
- Metadata: package information

Only standard-library code is imported here. The console entry point
installs its termination handlers after this package loads but before the
CLI stack does, so nothing heavy may be pulled in at package import time.
The configuration loader lives in :mod:`glitcha.composition`.
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Domain exports
from .domain.behaviors import build_glitch_line, iter_glitch_lines
from .domain.glyphs import GLYPH_SET

__all__ = [
    "GLYPH_SET",
    "build_glitch_line",
    "iter_glitch_lines",
    "print_info",
]
