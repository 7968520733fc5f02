"""Absolute version selectors: the non-relative part of a specification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NoSelector:
    """No selector given; the store's default revision applies."""


@dataclass(frozen=True)
class Number:
    """Explicit revision number (`#3`)."""

    value: int


@dataclass(frozen=True)
class Identifier:
    """Explicit opaque version ID (`#3f1c-42`)."""

    value: str


@dataclass(frozen=True)
class Label:
    """Named staging label (`:AWSPREVIOUS`)."""

    value: str


Absolute = NoSelector | Number | Identifier | Label


def has_absolute(selector: Absolute) -> bool:
    """Return True if the selector pins a revision."""
    return not isinstance(selector, NoSelector)


def format_selector(selector: Absolute) -> str:
    """Render a selector back to its canonical specifier text."""
    match selector:
        case NoSelector():
            return ""
        case Number(value) | Identifier(value):
            return f"#{value}"
        case Label(value):
            return f":{value}"
