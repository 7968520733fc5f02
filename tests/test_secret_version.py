"""Tests for the secret (version ID / staging label) grammar."""

import pytest

from revspec.absolute import Identifier, Label
from revspec.errors import (
    InvalidLabelError,
    InvalidVersionIdError,
    MultipleAbsoluteSpecifiersError,
)
from revspec.secret_version import parse
from revspec.spec import Spec


def test_parse_id_label_and_shift() -> None:
    """Verify the secret grammar end to end."""
    assert parse("my-secret") == Spec("my-secret")
    assert parse("my-secret#abc-123") == Spec("my-secret", Identifier("abc-123"))
    assert parse("my-secret:AWSPREVIOUS") == Spec("my-secret", Label("AWSPREVIOUS"))
    assert parse("my-secret:my_label~1") == Spec("my-secret", Label("my_label"), 1)
    assert parse("my-secret~") == Spec("my-secret", shift=1)


def test_numeric_looking_id_stays_text() -> None:
    """Verify that version IDs are kept as strings."""
    assert parse("s#123").absolute == Identifier("123")


def test_id_and_label_are_exclusive() -> None:
    """Verify that an ID and a label cannot both be given."""
    with pytest.raises(MultipleAbsoluteSpecifiersError):
        parse("my-secret#abc:AWSCURRENT")
    with pytest.raises(MultipleAbsoluteSpecifiersError):
        parse("my-secret:AWSCURRENT#abc")


def test_dangling_prefixes() -> None:
    """Verify the store-specific errors for bare prefixes."""
    with pytest.raises(InvalidVersionIdError, match="version ID"):
        parse("my-secret#")
    with pytest.raises(InvalidLabelError, match="label"):
        parse("my-secret:")
    with pytest.raises(InvalidLabelError):
        parse("my-secret:!")
