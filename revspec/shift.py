"""Parsing of git-like relative shift suffixes (`~`, `~2`, `~1~~`)."""

from revspec.char_class import is_digit
from revspec.errors import ShiftOverflowError, UnexpectedCharactersError

MAX_SHIFT = 2**63 - 1


def is_shift_start(text: str, i: int) -> bool:
    """Return True if `text[i]` is a `~` that begins a shift group.

    A shift group starts at a `~` followed by end of input, a digit,
    or another `~`.
    """
    if i < 0 or i >= len(text) or text[i] != "~":
        return False
    return i + 1 == len(text) or is_digit(text[i + 1]) or text[i + 1] == "~"


def parse_shift(text: str) -> int:
    """Sum every `~` group in `text`; the whole string must be consumed."""
    total = 0
    i = 0
    n = len(text)
    while i < n and text[i] == "~":
        i += 1
        start = i
        while i < n and is_digit(text[i]):
            i += 1
        digits = text[start:i]
        if not digits:
            total += 1
        else:
            step = int(digits)
            if step > MAX_SHIFT:
                raise ShiftOverflowError(digits)
            total += step
        if total > MAX_SHIFT:
            raise ShiftOverflowError(str(total))

    if i < n:
        raise UnexpectedCharactersError(text[i:])
    return total
