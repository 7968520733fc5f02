"""Logic for locating where the name of a version spec ends."""

from revspec.char_class import is_letter
from revspec.errors import AmbiguousTildeError
from revspec.shift import is_shift_start
from revspec.specifier_parser import SpecifierParser


def find_name_end(text: str, parsers: tuple[SpecifierParser, ...]) -> int:
    """Return the index of the first specifier character, or len(text).

    A `~` followed by a letter is rejected because it could be either part
    of the name or a mistyped shift. A `~` followed by any other symbol is
    name text. A registered prefix followed by a non-value character raises
    that parser's error, or is name text when the parser has none.
    """
    for i, c in enumerate(text):
        if c == "~":
            if is_shift_start(text, i):
                return i
            if i + 1 < len(text) and is_letter(text[i + 1]):
                raise AmbiguousTildeError
            continue

        for p in parsers:
            if c != p.prefix:
                continue
            if i + 1 < len(text) and p.is_char(text[i + 1]):
                return i
            if p.error is not None:
                raise p.error
    return len(text)
