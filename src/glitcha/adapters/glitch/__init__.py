"""Glitch settings adapter - typed view of the ``[glitch]`` config section.

Contents:
    * :mod:`.settings` - GlitchSettings model, loader, and override merge
"""

from __future__ import annotations

from .settings import GlitchSettings, apply_settings_overrides, load_glitch_settings_from_dict

__all__ = [
    "GlitchSettings",
    "apply_settings_overrides",
    "load_glitch_settings_from_dict",
]
