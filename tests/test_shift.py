"""Tests for shift suffix parsing."""

import pytest

from revspec.errors import ShiftOverflowError, UnexpectedCharactersError
from revspec.shift import is_shift_start, parse_shift


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("~", 1),
        ("~1", 1),
        ("~0", 0),
        ("~10", 10),
        ("~~", 2),
        ("~~~~", 4),
        ("~1~2", 3),
        ("~~1", 2),
        ("~1~~", 3),
        ("~0~0", 0),
    ],
)
def test_parse_shift_cumulative(text: str, expected: int) -> None:
    """Verify that shift groups are summed left to right."""
    assert parse_shift(text) == expected


@pytest.mark.parametrize("text", ["abc", "123", ":LABEL", "~a", "~2abc", "~!", "~ "])
def test_parse_shift_rejects_leftovers(text: str) -> None:
    """Verify that text which is not a shift group is rejected."""
    with pytest.raises(UnexpectedCharactersError, match="unexpected characters"):
        parse_shift(text)


def test_parse_shift_overflow() -> None:
    """Verify that digit runs beyond the shift range are rejected."""
    with pytest.raises(ShiftOverflowError):
        parse_shift("~99999999999999999999")
    with pytest.raises(ShiftOverflowError):
        parse_shift("~9223372036854775807~1")


def test_parse_shift_max_value() -> None:
    """Verify that the largest representable shift is accepted."""
    assert parse_shift("~9223372036854775807") == 2**63 - 1


@pytest.mark.parametrize(
    ("text", "i", "expected"),
    [
        ("abc", 3, False),
        ("", 0, False),
        ("abc", 0, False),
        ("abc~", 3, True),
        ("~", 0, True),
        ("~9", 0, True),
        ("~~", 1, True),
        ("~a", 0, False),
        ("~/", 0, False),
        ("~-", 0, False),
        ("abc~1def", 3, True),
        ("abc~def", 3, False),
    ],
)
def test_is_shift_start(text: str, i: int, expected: bool) -> None:  # noqa: FBT001
    """Verify detection of the start of a shift group."""
    assert is_shift_start(text, i) is expected
