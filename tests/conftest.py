"""Shared fixtures: a small two-specifier grammar used by the generic parser tests."""

import pytest

from revspec.absolute import Absolute, Label, Number
from revspec.char_class import is_digit, is_letter
from revspec.errors import InvalidSpecifierError
from revspec.specifier_parser import SpecifierParser


class HashError(InvalidSpecifierError):
    message = "# must be followed by a version number"


class ColonError(InvalidSpecifierError):
    message = ": must be followed by a label"


def _apply_number(value: str, current: Absolute) -> Absolute:
    return Number(int(value))


def _apply_label(value: str, current: Absolute) -> Absolute:
    return Label(value)


@pytest.fixture
def parsers() -> tuple[SpecifierParser, ...]:
    """A grammar with `#<digits>` and `:<alnum>` specifiers."""
    return (
        SpecifierParser(
            prefix="#",
            is_char=is_digit,
            error=HashError,
            duplicated=lambda abs_: isinstance(abs_, Number),
            apply=_apply_number,
        ),
        SpecifierParser(
            prefix=":",
            is_char=lambda c: is_letter(c) or is_digit(c),
            error=ColonError,
            duplicated=lambda abs_: isinstance(abs_, Label),
            apply=_apply_label,
        ),
    )
