"""Logic for resolving a version specification to a stored revision."""

import logging
from operator import attrgetter

from revspec.absolute import Absolute, Identifier, Label, NoSelector, Number
from revspec.errors import (
    LabelNotFoundError,
    ReadFailedError,
    RevisionNotFoundError,
    ShiftOutOfRangeError,
    VersionKeyNotFoundError,
)
from revspec.revision import Revision
from revspec.revision_reader import RevisionReader
from revspec.spec import Spec

logger = logging.getLogger(__name__)


def resolve(spec: Spec, reader: RevisionReader, *, refetch: bool = False) -> Revision:
    """Return the revision `spec` designates.

    Without a shift the reader is asked for the exact revision. With a shift
    the history is sorted newest first, the base index is located from the
    absolute selector and the shift is added to it. When `refetch` is set,
    the chosen history entry is read again by version key; stores whose
    history listing carries no payload need this.
    """
    if not spec.has_shift:
        return _get_exact(reader, spec.name, spec.absolute, "failed to get revision")

    try:
        history = reader.get_history(spec.name)
    except Exception as e:
        msg = f"failed to get history: {e}"
        raise ReadFailedError(msg) from e

    if not history:
        raise RevisionNotFoundError(spec.name)

    ordered = sort_newest_first(history)
    base = find_base_index(ordered, spec.absolute)
    target = base + spec.shift
    if target >= len(ordered):
        raise ShiftOutOfRangeError(spec.shift)

    logger.debug(
        "Resolved %s: base index %d, target index %d of %d",
        spec.name,
        base,
        target,
        len(ordered),
    )
    revision = ordered[target]
    if refetch:
        return _get_exact(
            reader,
            spec.name,
            selector_for_key(revision.version_key),
            "failed to get revision",
        )
    return revision


def sort_newest_first(history: list[Revision]) -> list[Revision]:
    """Sort by creation time descending; revisions without one go last."""
    dated = [r for r in history if r.created_at is not None]
    undated = [r for r in history if r.created_at is None]
    return sorted(dated, key=attrgetter("created_at"), reverse=True) + undated


def find_base_index(history: list[Revision], selector: Absolute) -> int:
    """Return the index of the first revision `selector` matches."""
    match selector:
        case NoSelector():
            return 0
        case Number(key) | Identifier(key):
            for i, r in enumerate(history):
                if r.version_key == key:
                    return i
            raise VersionKeyNotFoundError(key)
        case Label(label):
            for i, r in enumerate(history):
                if label in r.labels:
                    return i
            raise LabelNotFoundError(label)


def selector_for_key(key: int | str) -> Absolute:
    """Return the selector that pins exactly the revision with `key`."""
    if isinstance(key, int):
        return Number(key)
    return Identifier(key)


def _get_exact(
    reader: RevisionReader, name: str, selector: Absolute, context: str
) -> Revision:
    try:
        return reader.get_exact(name, selector)
    except Exception as e:
        msg = f"{context}: {e}"
        raise ReadFailedError(msg) from e
