"""Command line interface for inspecting and comparing stored revisions."""

import argparse
import json
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from revspec import param_version, secret_version
from revspec.absolute import Identifier, Label, NoSelector, Number
from revspec.errors import RevspecError
from revspec.file_store import FileRevisionStore
from revspec.load_config import load_config
from revspec.resolve import resolve, sort_newest_first
from revspec.revision import Revision
from revspec.revision_reader import RevisionReader
from revspec.spec import Spec, format_spec
from revspec.text_diff import format_json_value, revision_label, unified_diff

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreKind:
    """How one kind of store parses specs and resolves them."""

    parse: Callable[[str], Spec]
    parse_diff_args: Callable[[list[str]], tuple[Spec, Spec]]
    refetch: bool


KINDS: dict[str, StoreKind] = {
    "param": StoreKind(param_version.parse, param_version.parse_diff_args, False),
    "secret": StoreKind(secret_version.parse, secret_version.parse_diff_args, True),
}


def spec_to_dict(spec: Spec) -> dict[str, Any]:
    """Describe a parsed spec as a JSON-ready dictionary."""
    selector: str | None
    value: int | str | None
    match spec.absolute:
        case NoSelector():
            selector, value = None, None
        case Number(value):
            selector = "number"
        case Identifier(value):
            selector = "identifier"
        case Label(value):
            selector = "label"
    return {
        "name": spec.name,
        "selector": selector,
        "value": value,
        "shift": spec.shift,
        "canonical": format_spec(spec),
    }


def revision_to_dict(revision: Revision) -> dict[str, Any]:
    """Describe a revision as a JSON-ready dictionary."""
    return {
        "name": revision.name,
        "version": revision.version_key,
        "labels": sorted(revision.labels),
        "created_at": (
            revision.created_at.isoformat() if revision.created_at else None
        ),
        "value": revision.value,
    }


def _open_reader(args: argparse.Namespace, config: dict[str, Any]) -> RevisionReader:
    store = FileRevisionStore.load(args.store or config["store"]["path"])
    return store.reader(args.kind, config["secret"]["default_label"])


def cmd_parse(
    args: argparse.Namespace, config: dict[str, Any], kind: StoreKind
) -> int:
    """Print the parsed form of a spec."""
    spec = kind.parse(args.spec)
    print(json.dumps(spec_to_dict(spec), indent=2))
    return 0


def cmd_show(args: argparse.Namespace, config: dict[str, Any], kind: StoreKind) -> int:
    """Print the value of the revision a spec designates."""
    spec = kind.parse(args.spec)
    revision = resolve(spec, _open_reader(args, config), refetch=kind.refetch)
    if args.output == "json":
        print(json.dumps(revision_to_dict(revision), indent=2))
    else:
        print(revision.value)
    return 0


def cmd_diff(args: argparse.Namespace, config: dict[str, Any], kind: StoreKind) -> int:
    """Print what changed between two revisions."""
    spec_from, spec_to = kind.parse_diff_args(args.args)
    reader = _open_reader(args, config)
    old = resolve(spec_from, reader, refetch=kind.refetch)
    new = resolve(spec_to, reader, refetch=kind.refetch)

    old_value, new_value = old.value, new.value
    if args.parse_json or config["diff"]["parse_json"]:
        old_value = format_json_value(old_value)
        new_value = format_json_value(new_value)

    identical = old_value == new_value
    old_label = revision_label(spec_from.name, old)
    new_label = revision_label(spec_to.name, new)
    context_lines = config["diff"]["context_lines"]
    diff = (
        ""
        if identical
        else unified_diff(old_label, new_label, old_value, new_value, context_lines)
    )

    if args.output == "json":
        out = {
            "oldName": spec_from.name,
            "oldVersion": old.version_key,
            "oldValue": old_value,
            "newName": spec_to.name,
            "newVersion": new.version_key,
            "newValue": new_value,
            "identical": identical,
        }
        if diff:
            out["diff"] = diff
        print(json.dumps(out, indent=2))
        return 0

    if identical:
        logger.warning("comparing identical versions")
        logger.warning(
            "To compare with the previous version, use: revspec %s diff %s~1",
            args.kind,
            spec_from.name,
        )
        return 0

    sys.stdout.write(diff)
    return 0


def cmd_log(args: argparse.Namespace, config: dict[str, Any], kind: StoreKind) -> int:
    """List the revisions of an item, newest first."""
    history = sort_newest_first(_open_reader(args, config).get_history(args.name))
    if args.max_count is not None:
        history = history[: args.max_count]
    for r in history:
        created = r.created_at.isoformat() if r.created_at else "-"
        labels = ",".join(sorted(r.labels))
        print(f"{r.version_key}\t{created}\t{labels}".rstrip())
    return 0


def positive_int(text: str) -> int:
    """Argparse type for counts that must be at least 1."""
    try:
        value = int(text)
    except ValueError as e:
        msg = f"invalid positive integer: {text!r}"
        raise argparse.ArgumentTypeError(msg) from e
    if value < 1:
        msg = f"must be at least 1: {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for every subcommand."""
    ap = argparse.ArgumentParser(
        prog="revspec",
        description=(
            "Address revisions of stored parameters and secrets with "
            "git-like specs (name#3, name~1, name:LABEL~2)."
        ),
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument("--store", help="Path to the YAML revision store")
    ap.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    kinds = ap.add_subparsers(dest="kind", required=True)
    for kind_name, help_text in (
        ("param", "Numeric-revision parameters (#N, ~N)"),
        ("secret", "Secrets by version ID or label (#ID, :LABEL, ~N)"),
    ):
        kp = kinds.add_parser(kind_name, help=help_text)
        commands = kp.add_subparsers(dest="command", required=True)

        p = commands.add_parser("parse", help="Show how a spec is parsed")
        p.add_argument("spec")
        p.set_defaults(func=cmd_parse)

        p = commands.add_parser("show", help="Show the value of a revision")
        p.add_argument("spec")
        p.add_argument("--output", choices=["text", "json"], default="text")
        p.set_defaults(func=cmd_show)

        p = commands.add_parser(
            "diff",
            help="Show the diff between two revisions",
            usage="%(prog)s <spec1> [spec2] | <name> <version1> [version2]",
        )
        p.add_argument("args", nargs="*")
        p.add_argument(
            "-j",
            "--parse-json",
            action="store_true",
            help="Format JSON values before diffing (keys are sorted)",
        )
        p.add_argument("--output", choices=["text", "json"], default="text")
        p.set_defaults(func=cmd_diff)

        p = commands.add_parser("log", help="List revisions, newest first")
        p.add_argument("name")
        p.add_argument("-n", "--max-count", type=positive_int, default=None)
        p.set_defaults(func=cmd_log)
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        level = "DEBUG" if args.verbose else str(config["logging"]["level"]).upper()
        logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
        return args.func(args, config, KINDS[args.kind])
    except RevspecError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
