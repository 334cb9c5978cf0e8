"""Domain enum tests: member values, string equality, and direction offsets."""

from __future__ import annotations

import pytest

from glitcha.domain.enums import Direction, OutputFormat
from glitcha.domain.errors import InvalidLengthRangeError

# ======================== OutputFormat ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
    ],
)
def test_output_format_member_values(member: OutputFormat, expected_value: str) -> None:
    """Each OutputFormat member compares equal to its plain string."""
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_output_format_member_count() -> None:
    """OutputFormat has exactly 2 members."""
    assert len(OutputFormat) == 2


# ======================== Direction ========================


@pytest.mark.os_agnostic
def test_direction_covers_all_eight_neighbours() -> None:
    """The eight offsets are exactly the cells around the origin."""
    offsets = {direction.offset for direction in Direction}

    assert len(offsets) == 8
    assert offsets == {(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)} - {(0, 0)}


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "offset"),
    [
        (Direction.LEFT, (-1, 0)),
        (Direction.RIGHT, (1, 0)),
        (Direction.UP, (0, -1)),
        (Direction.DOWN, (0, 1)),
    ],
)
def test_direction_offsets_grow_downwards(member: Direction, offset: tuple[int, int]) -> None:
    """Rows grow downwards, like terminal rows."""
    assert member.offset == offset


# ======================== errors ========================


@pytest.mark.os_agnostic
def test_invalid_length_range_error_preserves_message() -> None:
    """The message is kept for display."""
    exc = InvalidLengthRangeError("min_length 5 exceeds max_length 2")

    assert str(exc) == "min_length 5 exceeds max_length 2"


@pytest.mark.os_agnostic
def test_invalid_length_range_error_is_value_error() -> None:
    """Generic argument validation still catches it."""
    with pytest.raises(ValueError, match="exceeds"):
        raise InvalidLengthRangeError("min_length 5 exceeds max_length 2")
