"""Configuration adapter - loading, display, and overrides via lib_layered_config.

Contents:
    * :mod:`.loader` - Cached layered configuration loading
    * :mod:`.display` - Human/JSON configuration display
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
]
