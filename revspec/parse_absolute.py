"""Logic for consuming absolute specifiers (`#3`, `#id`, `:LABEL`)."""

from revspec.absolute import Absolute
from revspec.errors import (
    InvalidSpecifierValueError,
    MultipleAbsoluteSpecifiersError,
)
from revspec.specifier_parser import SpecifierParser, match_parser


def parse_absolute(
    text: str, parsers: tuple[SpecifierParser, ...], current: Absolute
) -> tuple[Absolute, str]:
    """Apply every leading absolute specifier in `text`.

    Stops at the first `~` or at a character no parser claims, and returns
    the selector together with the unconsumed rest.
    """
    while text and text[0] != "~":
        p = match_parser(text[0], parsers)
        if p is None:
            break

        end = 1
        while end < len(text) and p.is_char(text[end]):
            end += 1
        value = text[1:end]

        if p.duplicated is not None and p.duplicated(current):
            raise MultipleAbsoluteSpecifiersError
        try:
            current = p.apply(value, current)
        except ValueError as e:
            raise InvalidSpecifierValueError(value, e) from e

        text = text[end:]
    return current, text
