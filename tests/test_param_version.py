"""Tests for the parameter (numeric revision) grammar."""

import pytest

from revspec.absolute import Number
from revspec.errors import (
    InvalidSpecifierValueError,
    InvalidVersionNumberError,
    MultipleAbsoluteSpecifiersError,
)
from revspec.param_version import parse
from revspec.spec import Spec


def test_parse_version_and_shift() -> None:
    """Verify the parameter grammar end to end."""
    assert parse("/app/config") == Spec("/app/config")
    assert parse("/app/config#3") == Spec("/app/config", Number(3))
    assert parse("/app/config#5~2") == Spec("/app/config", Number(5), 2)
    assert parse("/app/config~~") == Spec("/app/config", shift=2)


def test_hash_requires_digits() -> None:
    """Verify that `#` must be followed by a version number."""
    with pytest.raises(InvalidVersionNumberError, match="version number"):
        parse("/app/config#abc")
    with pytest.raises(InvalidVersionNumberError):
        parse("/app/config#")


def test_duplicate_version_rejected() -> None:
    """Verify that two version numbers cannot be combined."""
    with pytest.raises(MultipleAbsoluteSpecifiersError):
        parse("x#1#2")


def test_colon_is_name_text() -> None:
    """Verify that `:` has no meaning for parameters."""
    assert parse("arn:aws:ssm#2") == Spec("arn:aws:ssm", Number(2))


def test_version_overflow() -> None:
    """Verify that version numbers beyond 64 bits are rejected."""
    with pytest.raises(InvalidSpecifierValueError, match="99999999999999999999"):
        parse("x#99999999999999999999")
    assert parse("x#9223372036854775807").absolute == Number(2**63 - 1)
