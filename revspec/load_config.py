"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from revspec.deep_merge import deep_merge
from revspec.errors import RevspecError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "revspec.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "store": {
        "path": "revisions.yml",
    },
    "secret": {
        "default_label": "AWSCURRENT",
    },
    "diff": {
        "context_lines": 3,
        "parse_json": False,
    },
    "logging": {
        "level": "WARNING",
    },
}


class ConfigError(RevspecError):
    """The configuration file cannot be used."""


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    p = Path(path or DEFAULT_CONFIG_PATH)
    if not p.exists():
        if path:
            logger.warning("Config file %s not found; using defaults", p)
        return config

    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        msg = f"invalid config file {p}: {e}"
        raise ConfigError(msg) from e
    if not isinstance(user_config, dict):
        msg = f"config file {p} must contain a mapping"
        raise ConfigError(msg)

    logger.info("Loaded config from %s", p)
    config = deep_merge(config, user_config)
    validate_config(config, p)
    return config


def validate_config(config: dict[str, Any], path: Path) -> None:
    """Check the shape of the values the command line reads."""
    for section in DEFAULT_CONFIG:
        if not isinstance(config[section], dict):
            msg = f"config file {path}: '{section}' must be a mapping"
            raise ConfigError(msg)

    context_lines = config["diff"]["context_lines"]
    if (
        not isinstance(context_lines, int)
        or isinstance(context_lines, bool)
        or context_lines < 0
    ):
        msg = f"config file {path}: diff.context_lines must be a non-negative integer"
        raise ConfigError(msg)

    level = str(config["logging"]["level"]).upper()
    if level not in logging.getLevelNamesMapping():
        msg = f"config file {path}: unknown logging.level {level!r}"
        raise ConfigError(msg)
