"""Version specifications for identifier/label stores (secrets).

Grammar: `<name>[#<id> | :<label>]<shift>*`

A version ID and a staging label are mutually exclusive.

Examples: my-secret, my-secret#abc123, my-secret:AWSCURRENT, my-secret~1
"""

from revspec.absolute import Absolute, Identifier, Label, has_absolute
from revspec.char_class import is_id_char, is_label_char
from revspec.diff_args import parse_diff_args as _parse_diff_args
from revspec.errors import InvalidLabelError, InvalidVersionIdError
from revspec.parse_spec import parse_spec
from revspec.spec import Spec
from revspec.specifier_parser import SpecifierParser

DIFF_PREFIXES = "#:~"
DIFF_USAGE = (
    "usage: revspec secret diff <spec1> [spec2] | <name> <version1> [version2]"
)


def _apply_id(value: str, current: Absolute) -> Absolute:
    return Identifier(value)


def _apply_label(value: str, current: Absolute) -> Absolute:
    return Label(value)


PARSERS: tuple[SpecifierParser, ...] = (
    SpecifierParser(
        prefix="#",
        is_char=is_id_char,
        error=InvalidVersionIdError,
        duplicated=has_absolute,
        apply=_apply_id,
    ),
    SpecifierParser(
        prefix=":",
        is_char=is_label_char,
        error=InvalidLabelError,
        duplicated=has_absolute,
        apply=_apply_label,
    ),
)


def parse(text: str) -> Spec:
    """Parse a secret version specification."""
    return parse_spec(text, PARSERS)


def parse_diff_args(tokens: list[str]) -> tuple[Spec, Spec]:
    """Parse secret diff arguments into `(spec_from, spec_to)`."""
    return _parse_diff_args(tokens, parse, DIFF_PREFIXES, DIFF_USAGE)
