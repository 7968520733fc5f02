"""Plain-text rendering of the difference between two revisions."""

import difflib
import json
import logging

from revspec.revision import Revision

logger = logging.getLogger(__name__)


def revision_label(name: str, revision: Revision) -> str:
    """Label a diff side as `name#<version>`."""
    return f"{name}#{revision.version_key}"


def unified_diff(
    old_label: str, new_label: str, old: str, new: str, context_lines: int = 3
) -> str:
    """Return a unified diff of two values, or "" when they are equal."""
    lines = difflib.unified_diff(
        old.splitlines(keepends=True),
        new.splitlines(keepends=True),
        fromfile=old_label,
        tofile=new_label,
        n=context_lines,
    )
    out = []
    for line in lines:
        out.append(line if line.endswith("\n") else line + "\n")
    return "".join(out)


def format_json_value(text: str) -> str:
    """Pretty-print a JSON value with sorted keys; leave other text alone."""
    try:
        parsed = json.loads(text)
    except ValueError:
        logger.warning("Value is not valid JSON; comparing it as plain text")
        return text
    return json.dumps(parsed, indent=2, sort_keys=True, ensure_ascii=False)
