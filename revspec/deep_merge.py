"""Logic for deep merging configuration dictionaries."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Lists and scalars in 'update' replace those in 'base'.
    - A None in 'update' keeps the value from 'base', so an empty YAML key
      such as `diff:` falls back to the defaults.
    - Neither input is modified.
    """
    result = base.copy()
    for key, value in update.items():
        if value is None and key in result:
            continue
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
