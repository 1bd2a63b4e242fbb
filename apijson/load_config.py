"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from apijson.deep_merge import deep_merge
from apijson.errors import ConfigError
from apijson.member_order import MemberOrder

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "member_order": MemberOrder.ALPHABETICAL.value,
    "output": {
        "indent": 2,
        "ensure_ascii": False,
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            logger.warning("Config file %s not found, using defaults", p)
            return config
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            msg = f"Could not parse config file {p}: {exc}"
            raise ConfigError(msg) from exc
        if not isinstance(user_config, dict):
            msg = f"Config file {p} must contain a mapping"
            raise ConfigError(msg)
        config = deep_merge(config, user_config)
    return config


def resolve_member_order(config: dict[str, Any]) -> MemberOrder:
    """Return the member order policy named by the configuration."""
    value = config.get("member_order", MemberOrder.ALPHABETICAL.value)
    try:
        return MemberOrder(str(value).strip().lower())
    except ValueError:
        known = ", ".join(m.value for m in MemberOrder)
        msg = f"Unknown member_order {value!r} (expected one of: {known})"
        raise ConfigError(msg) from None


def resolve_log_level(name: str) -> int:
    """Return the numeric logging level for a level name such as ``"INFO"``."""
    level = logging.getLevelName(str(name).strip().upper())
    if not isinstance(level, int):
        msg = f"Unknown log level {name!r}"
        raise ConfigError(msg)
    return level
