"""Interpretation of the positional arguments of a diff command.

A diff compares two revisions of a named item. Three argument styles are
accepted and may be mixed:

Full spec, every argument names the item:

    diff /app/config#3                  -> #3 against the default
    diff /app/config#1 /app/config#2    -> #1 against #2

Partial spec, the name is given once and specifiers follow:

    diff /app/config '#3'               -> #3 against the default
    diff /app/config '#1' '#2'          -> #1 against #2

Mixed, a full spec followed by a bare specifier:

    diff /app/config#1 '#2'             -> #1 against #2

The result is always `(spec_from, spec_to)`, read as "what changed from
`spec_from` to `spec_to`". In the partial two-argument form the specified
revision becomes `spec_from` so that it is compared against the default
regardless of where it was typed.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import cached_property

from revspec.absolute import Absolute, has_absolute
from revspec.errors import (
    DiffUsageError,
    InvalidDiffArgumentError,
    VersionSpecError,
)
from revspec.spec import Spec, default_spec

logger = logging.getLogger(__name__)

ParseFunc = Callable[[str], Spec]
SpecPair = tuple[Spec, Spec]


@dataclass
class DiffArgs:
    """Raw diff tokens together with the store-specific parsing hooks."""

    tokens: list[str]
    parse: ParseFunc
    prefixes: str
    has_absolute: Callable[[Absolute], bool] = has_absolute

    def parse_as(self, which: str, text: str) -> Spec:
        """Parse `text`, naming the failing side in the error."""
        try:
            return self.parse(text)
        except VersionSpecError as e:
            raise InvalidDiffArgumentError(which, e) from e

    @cached_property
    def first(self) -> Spec:
        """The first token parsed as a complete specification."""
        return self.parse_as("invalid first argument", self.tokens[0])

    @property
    def second_is_specifier(self) -> bool:
        """True if the second token starts with a specifier character."""
        second = self.tokens[1]
        return bool(second) and second[0] in self.prefixes

    @property
    def first_has_specifier(self) -> bool:
        """True if the first token carried a selector or a shift."""
        return self.has_absolute(self.first.absolute) or self.first.has_shift


Handler = Callable[[DiffArgs], SpecPair]


def _always(args: DiffArgs) -> bool:
    return True


def _one_arg(args: DiffArgs) -> SpecPair:
    spec = args.parse_as("invalid version specification", args.tokens[0])
    return spec, default_spec(spec.name)


def _two_arg_full(args: DiffArgs) -> SpecPair:
    return args.first, args.parse_as("invalid second argument", args.tokens[1])


def _two_arg_mixed(args: DiffArgs) -> SpecPair:
    second = args.parse_as(
        "invalid second argument", args.first.name + args.tokens[1]
    )
    return args.first, second


def _two_arg_partial(args: DiffArgs) -> SpecPair:
    # Swap: the specified revision is the "from" side, the default the "to" side
    specified = args.parse_as(
        "invalid second argument", args.first.name + args.tokens[1]
    )
    return specified, default_spec(args.first.name)


def _three_arg(args: DiffArgs) -> SpecPair:
    name, version1, version2 = args.tokens
    spec_from = args.parse_as("invalid version1", name + version1)
    spec_to = args.parse_as("invalid version2", name + version2)
    return spec_from, spec_to


# (shape, token count, predicate, handler); first match wins.
SHAPES: tuple[tuple[str, int, Callable[[DiffArgs], bool], Handler], ...] = (
    ("one_arg", 1, _always, _one_arg),
    ("two_arg_full", 2, lambda a: not a.second_is_specifier, _two_arg_full),
    ("two_arg_mixed", 2, lambda a: a.first_has_specifier, _two_arg_mixed),
    ("two_arg_partial", 2, _always, _two_arg_partial),
    ("three_arg", 3, _always, _three_arg),
)


def detect_shape(args: DiffArgs) -> tuple[str, Handler] | None:
    """Return the name and handler of the first shape matching `args`."""
    for shape, count, matches, handler in SHAPES:
        if len(args.tokens) == count and matches(args):
            return shape, handler
    return None


def parse_diff_args(
    tokens: list[str],
    parse: ParseFunc,
    prefixes: str,
    usage: str,
    has_absolute: Callable[[Absolute], bool] = has_absolute,
) -> SpecPair:
    """Turn 1-3 diff tokens into an ordered `(spec_from, spec_to)` pair."""
    args = DiffArgs(list(tokens), parse, prefixes, has_absolute)
    detected = detect_shape(args)
    if detected is None:
        raise DiffUsageError(usage)

    shape, handler = detected
    logger.debug("Diff arguments %r match shape %s", tokens, shape)
    return handler(args)
