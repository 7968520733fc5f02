"""Version specifications for numeric-revision stores (parameters).

Grammar: `<name>[#<N>]<shift>*`

Examples: /my/param, /my/param#3, /my/param~1, /my/param#5~2, /my/param~~
"""

from revspec.absolute import Absolute, Number, has_absolute
from revspec.char_class import is_digit
from revspec.diff_args import parse_diff_args as _parse_diff_args
from revspec.errors import InvalidVersionNumberError
from revspec.parse_spec import parse_spec
from revspec.spec import Spec
from revspec.specifier_parser import SpecifierParser

MAX_VERSION = 2**63 - 1
DIFF_PREFIXES = "#~"
DIFF_USAGE = (
    "usage: revspec param diff <spec1> [spec2] | <name> <version1> [version2]"
)


def _apply_number(value: str, current: Absolute) -> Absolute:
    number = int(value)
    if number > MAX_VERSION:
        msg = f"version number exceeds {MAX_VERSION}"
        raise ValueError(msg)
    return Number(number)


PARSERS: tuple[SpecifierParser, ...] = (
    SpecifierParser(
        prefix="#",
        is_char=is_digit,
        error=InvalidVersionNumberError,
        duplicated=has_absolute,
        apply=_apply_number,
    ),
)


def parse(text: str) -> Spec:
    """Parse a parameter version specification."""
    return parse_spec(text, PARSERS)


def parse_diff_args(tokens: list[str]) -> tuple[Spec, Spec]:
    """Parse parameter diff arguments into `(spec_from, spec_to)`."""
    return _parse_diff_args(tokens, parse, DIFF_PREFIXES, DIFF_USAGE)
