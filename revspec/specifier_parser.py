"""Descriptor for one kind of absolute specifier in a store's grammar."""

from collections.abc import Callable
from dataclasses import dataclass

from revspec.absolute import Absolute
from revspec.errors import InvalidSpecifierError


@dataclass(frozen=True)
class SpecifierParser:
    """One row of a store's specifier table.

    Attributes:
        prefix: Character that starts the specifier, e.g. "#" or ":".
        is_char: True for characters that belong to the specifier value.
        error: Raised when `prefix` is not followed by a value character.
            If None, the prefix is ordinary name text in that position.
        duplicated: True if `current` already holds a conflicting selector.
            None disables the check, so a later specifier overwrites.
        apply: Builds the new selector from the value text. May raise
            ValueError; the caller reports the offending value.

    """

    prefix: str
    is_char: Callable[[str], bool]
    apply: Callable[[str, Absolute], Absolute]
    error: type[InvalidSpecifierError] | None = None
    duplicated: Callable[[Absolute], bool] | None = None


def match_parser(
    c: str, parsers: tuple[SpecifierParser, ...]
) -> SpecifierParser | None:
    """Return the first parser registered for prefix `c`, if any."""
    for p in parsers:
        if p.prefix == c:
            return p
    return None
