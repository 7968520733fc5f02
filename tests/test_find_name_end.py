"""Tests for locating the end of the name in a version spec."""

import pytest

from revspec.char_class import is_digit
from revspec.errors import AmbiguousTildeError, InvalidSpecifierError
from revspec.find_name_end import find_name_end
from revspec.specifier_parser import SpecifierParser


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("/my/param", 9),
        ("/my/param#3", 9),
        ("/my/param~1", 9),
        ("/my/param~", 9),
        ("/my/param~~", 9),
        ("secret:AWSCURRENT", 6),
        ("/my/param~-x", 12),
        ("#3", 0),
    ],
)
def test_find_name_end(
    text: str, expected: int, parsers: tuple[SpecifierParser, ...]
) -> None:
    """Verify the boundary between name and specifier."""
    assert find_name_end(text, parsers) == expected


def test_tilde_before_letter_is_ambiguous(
    parsers: tuple[SpecifierParser, ...],
) -> None:
    """Verify that `~` followed by a letter is rejected."""
    with pytest.raises(AmbiguousTildeError, match="ambiguous tilde"):
        find_name_end("/my/param~backup", parsers)


def test_prefix_without_value_raises_parser_error(
    parsers: tuple[SpecifierParser, ...],
) -> None:
    """Verify that a dangling prefix raises that parser's own error."""
    with pytest.raises(InvalidSpecifierError, match="# must be followed by"):
        find_name_end("/my/param#", parsers)
    with pytest.raises(InvalidSpecifierError, match=": must be followed by"):
        find_name_end("secret:-x", parsers)


def test_prefix_without_error_is_name_text() -> None:
    """Verify that a prefix with no error set is treated as part of the name."""
    at = (
        SpecifierParser(
            prefix="@",
            is_char=is_digit,
            apply=lambda value, current: current,
        ),
    )
    assert find_name_end("user@example.com", at) == len("user@example.com")
    assert find_name_end("param@12", at) == len("param")
