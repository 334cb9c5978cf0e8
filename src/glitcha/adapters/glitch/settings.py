"""Glitch printer settings model and loader.

Provides the GlitchSettings Pydantic model for validated, immutable printer
settings and the loader that builds it from the ``[glitch]`` config section.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from glitcha.domain.behaviors import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH


class GlitchSettings(BaseModel):
    """Validated, immutable glitch printer settings.

    Defaults reproduce the classic behaviour: one line of 1 to 20 glyphs
    every 100 milliseconds from an unseeded random source.

    Example:
        >>> settings = GlitchSettings()
        >>> settings.interval_ms, settings.min_length, settings.max_length
        (100, 1, 20)
        >>> settings.seed is None
        True
    """

    model_config = ConfigDict(frozen=True)

    interval_ms: int = Field(default=100, gt=0)
    min_length: int = Field(default=DEFAULT_MIN_LENGTH, ge=1)
    max_length: int = Field(default=DEFAULT_MAX_LENGTH, ge=1)
    seed: int | None = None

    # Full-screen streams
    stream_interval_ms: int = Field(default=50, gt=0)
    stream_chaos: float = Field(default=0.20, ge=0.0, le=1.0)
    max_streams: int = Field(default=20, ge=1)
    stream_max_length: int = Field(default=16, ge=1)

    @field_validator("seed", mode="before")
    @classmethod
    def _coerce_empty_seed_to_none(cls, v: Any) -> Any:
        """Treat an empty string from TOML or the environment as "unseeded".

        Examples:
            >>> GlitchSettings._coerce_empty_seed_to_none("")
            >>> GlitchSettings._coerce_empty_seed_to_none(7)
            7
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_lengths(self) -> GlitchSettings:
        """Reject a length range that cannot produce a line.

        Example:
            >>> GlitchSettings(min_length=5, max_length=2)  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValidationError: ...
        """
        if self.min_length > self.max_length:
            raise ValueError(f"min_length {self.min_length} exceeds max_length {self.max_length}")
        return self

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000.0

    @property
    def stream_interval_seconds(self) -> float:
        return self.stream_interval_ms / 1000.0


def load_glitch_settings_from_dict(config_dict: Mapping[str, Any]) -> GlitchSettings:
    """Load GlitchSettings from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a 'glitch' section; missing keys use defaults.

    Returns:
        Validated settings.

    Raises:
        pydantic.ValidationError: When a value is out of range or mistyped.

    Example:
        >>> load_glitch_settings_from_dict({"glitch": {"interval_ms": 250}}).interval_ms
        250
        >>> load_glitch_settings_from_dict({}).max_length
        20
    """
    glitch_raw = config_dict.get("glitch", {})
    return GlitchSettings.model_validate(cast("dict[str, Any]", glitch_raw) if glitch_raw else {})


def apply_settings_overrides(base: GlitchSettings, overrides: Mapping[str, Any]) -> GlitchSettings:
    """Merge CLI option overrides into settings with full validation.

    ``None`` values mean "option not given" and are dropped. Uses
    ``model_validate`` on the merged dict rather than ``model_copy`` so the
    validators run on overridden values too.

    Raises:
        pydantic.ValidationError: When an override is invalid.

    Example:
        >>> base = GlitchSettings()
        >>> apply_settings_overrides(base, {"seed": 3, "max_length": None}).seed
        3
        >>> apply_settings_overrides(base, {}) is base
        True
    """
    given = {key: value for key, value in overrides.items() if value is not None}
    if not given:
        return base
    return GlitchSettings.model_validate({**base.model_dump(), **given})


__all__ = [
    "GlitchSettings",
    "apply_settings_overrides",
    "load_glitch_settings_from_dict",
]
