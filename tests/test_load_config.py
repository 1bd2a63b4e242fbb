"""Tests for configuration loading and merging."""

import logging
from pathlib import Path

import pytest
import yaml

from apijson.deep_merge import deep_merge
from apijson.errors import ConfigError
from apijson.load_config import (
    DEFAULT_CONFIG,
    load_config,
    resolve_log_level,
    resolve_member_order,
)
from apijson.member_order import MemberOrder


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    merged = deep_merge(base, {"nested": {"y": 3, "z": 4}})
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}
    assert base == {"nested": {"x": 1, "y": 2}}


def test_deep_merge_lists_replace() -> None:
    """Verify that lists are replaced, not concatenated."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3]}) == {"arr": [3]}


def test_load_config_defaults() -> None:
    """Verify that the defaults are returned when no path is given."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config overrides defaults and keeps the rest."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump({"member_order": "declaration", "output": {"indent": 4}})
    )

    loaded = load_config(str(config_file))

    indent = 4
    assert loaded["member_order"] == "declaration"
    assert loaded["output"]["indent"] == indent
    assert loaded["output"]["ensure_ascii"] is False
    assert loaded["logging"]["level"] == "WARNING"


def test_load_config_missing_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Verify that a missing config file falls back to defaults with a warning."""
    with caplog.at_level(logging.WARNING):
        config = load_config(str(tmp_path / "absent.yml"))
    assert config == DEFAULT_CONFIG
    assert "not found" in caplog.text


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a config file must contain a mapping."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_config(str(config_file))


def test_resolve_member_order() -> None:
    """Verify member order lookup from configuration."""
    assert resolve_member_order({}) is MemberOrder.ALPHABETICAL
    assert resolve_member_order({"member_order": "Declaration"}) is MemberOrder.DECLARATION
    with pytest.raises(ConfigError, match="member_order"):
        resolve_member_order({"member_order": "random"})


def test_resolve_log_level() -> None:
    """Verify log level names are resolved and unknown ones rejected."""
    assert resolve_log_level("debug") == logging.DEBUG
    with pytest.raises(ConfigError):
        resolve_log_level("LOUD")
