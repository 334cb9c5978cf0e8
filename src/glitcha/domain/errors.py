"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidLengthRangeError(ValueError):
    """A requested glyph count range cannot produce a line.

    Raised when the lower bound is below one or exceeds the upper bound.
    Inherits from ValueError so generic argument validation still catches it.

    Example:
        >>> from glitcha.domain.errors import InvalidLengthRangeError
        >>> err = InvalidLengthRangeError("min_length 5 exceeds max_length 2")
        >>> isinstance(err, ValueError)
        True
    """


__all__ = [
    "InvalidLengthRangeError",
]
