"""A revision store backed by a local YAML file.

The file holds one section per store kind, each mapping item names to a list
of revisions:

    param:
      /app/config:
        - version: 1
          created_at: 2026-01-01T00:00:00Z
          value: "debug: false"
    secret:
      my-secret:
        - version: 3f1c-42
          created_at: 2026-01-02T00:00:00Z
          labels: [AWSCURRENT]
          value: "s3cr3t"
"""

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from revspec.absolute import Absolute, Identifier, Label, NoSelector, Number
from revspec.errors import StoreError
from revspec.revision import Revision

logger = logging.getLogger(__name__)

STORE_KINDS = ("param", "secret")


def to_datetime(raw: object) -> datetime | None:
    """Normalize a YAML timestamp value to an aware UTC datetime."""
    if raw is None:
        return None
    if isinstance(raw, datetime):
        value = raw
    elif isinstance(raw, date):
        value = datetime(raw.year, raw.month, raw.day)
    elif isinstance(raw, str):
        try:
            value = datetime.fromisoformat(raw)
        except ValueError as e:
            msg = f"invalid timestamp {raw!r}"
            raise StoreError(msg) from e
    else:
        msg = f"invalid timestamp {raw!r}"
        raise StoreError(msg)

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_revision(name: str, kind: str, entry: object) -> Revision:
    if not isinstance(entry, dict) or "version" not in entry:
        msg = f"{kind} {name}: every revision needs a 'version'"
        raise StoreError(msg)

    raw_key = entry["version"]
    key: int | str
    if kind == "param":
        if not isinstance(raw_key, int) or isinstance(raw_key, bool):
            msg = f"{kind} {name}: version {raw_key!r} is not a number"
            raise StoreError(msg)
        key = raw_key
    else:
        key = str(raw_key)

    value = entry.get("value", "")
    return Revision(
        version_key=key,
        value="" if value is None else str(value),
        created_at=to_datetime(entry.get("created_at")),
        labels=frozenset(str(x) for x in entry.get("labels") or []),
        name=name,
    )


class FileRevisionStore:
    """Revisions of parameters and secrets loaded from one YAML document."""

    def __init__(self, data: dict[str, Any]) -> None:
        """Build the store from an already parsed YAML document."""
        self.items: dict[str, dict[str, list[Revision]]] = {}
        for kind in STORE_KINDS:
            section = data.get(kind) or {}
            if not isinstance(section, dict):
                msg = f"section '{kind}' must map names to revision lists"
                raise StoreError(msg)
            self.items[kind] = {
                str(name): [_to_revision(str(name), kind, e) for e in entries or []]
                for name, entries in section.items()
            }

    @classmethod
    def load(cls, path: str | Path) -> "FileRevisionStore":
        """Read and parse a store file."""
        p = Path(path)
        try:
            data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except OSError as e:
            msg = f"cannot read store file {p}: {e}"
            raise StoreError(msg) from e
        except yaml.YAMLError as e:
            msg = f"invalid store file {p}: {e}"
            raise StoreError(msg) from e
        if not isinstance(data, dict):
            msg = f"store file {p} must contain a mapping"
            raise StoreError(msg)

        store = cls(data)
        logger.info(
            "Loaded %d parameters and %d secrets from %s",
            len(store.items["param"]),
            len(store.items["secret"]),
            p,
        )
        return store

    def reader(
        self, kind: str, default_label: str = "AWSCURRENT"
    ) -> "ParamReader | SecretReader":
        """Return a revision reader for one store kind."""
        if kind == "param":
            return ParamReader(self.items["param"])
        if kind == "secret":
            return SecretReader(self.items["secret"], default_label)
        msg = f"unknown store kind: {kind}"
        raise StoreError(msg)


class _Reader:
    kind = ""

    def __init__(self, items: dict[str, list[Revision]]) -> None:
        self.items = items

    def get_history(self, name: str) -> list[Revision]:
        """Return every revision of `name` in file order."""
        return list(self._revisions(name))

    def _revisions(self, name: str) -> list[Revision]:
        revisions = self.items.get(name)
        if not revisions:
            msg = f"{self.kind} not found: {name}"
            raise StoreError(msg)
        return revisions

    def _by_key(self, name: str, key: int | str) -> Revision:
        for r in self._revisions(name):
            if r.version_key == key:
                return r
        msg = f"{self.kind} {name} has no version {key}"
        raise StoreError(msg)


class ParamReader(_Reader):
    """Reader for numeric-revision parameters."""

    kind = "parameter"

    def get_exact(self, name: str, selector: Absolute) -> Revision:
        """Return the pinned version, or the highest version number."""
        match selector:
            case NoSelector():
                return max(self._revisions(name), key=lambda r: int(r.version_key))
            case Number(key):
                return self._by_key(name, key)
            case _:
                msg = f"parameters cannot be selected by {selector!r}"
                raise StoreError(msg)


class SecretReader(_Reader):
    """Reader for secrets addressed by version ID or staging label."""

    kind = "secret"

    def __init__(self, items: dict[str, list[Revision]], default_label: str) -> None:
        super().__init__(items)
        self.default_label = default_label

    def get_exact(self, name: str, selector: Absolute) -> Revision:
        """Return the pinned version, or the one carrying the default label."""
        match selector:
            case NoSelector():
                return self._by_label(name, self.default_label)
            case Identifier(key):
                return self._by_key(name, key)
            case Label(label):
                return self._by_label(name, label)
            case _:
                msg = f"secrets cannot be selected by {selector!r}"
                raise StoreError(msg)

    def _by_label(self, name: str, label: str) -> Revision:
        for r in self._revisions(name):
            if label in r.labels:
                return r
        msg = f"secret {name} has no version labelled {label}"
        raise StoreError(msg)
