"""Concrete stored revisions as returned by a revision reader."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Revision:
    """One stored revision of a parameter or secret."""

    version_key: int | str
    value: str = ""
    created_at: datetime | None = None
    labels: frozenset[str] = field(default_factory=frozenset)
    name: str = ""
