"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from assertable.config import AssertConfig, get_config, load_config, set_config
from assertable.reporting import FailureCollector, RaisingReporter, default_reporter


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "assertable.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = AssertConfig()
    assert cfg.max_value_length == 200
    assert cfg.fail_fast is False
    assert cfg.debug_log == "evaluations"


def test_load_config(tmp_yaml):
    path = tmp_yaml("""\
        max_value_length: 50
        fail_fast: true
    """)
    cfg = load_config(path)
    assert cfg.max_value_length == 50
    assert cfg.fail_fast is True


def test_load_empty_config_gives_defaults(tmp_yaml):
    assert load_config(tmp_yaml("")) == AssertConfig()


def test_unknown_key_is_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("max_length: 50\n"))


def test_debug_log_accepts_only_known_settings(tmp_yaml):
    assert load_config(tmp_yaml("debug_log: failures\n")).debug_log == "failures"
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("debug_log: everything\n"))


def test_max_value_length_lower_bound(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("max_value_length: 3\n"))


def test_top_level_must_be_mapping(tmp_yaml):
    with pytest.raises(ValueError, match="mapping"):
        load_config(tmp_yaml("- fail_fast\n"))


def test_set_config_returns_previous():
    custom = AssertConfig(max_value_length=30)
    previous = set_config(custom)
    assert get_config() is custom
    assert previous == AssertConfig()


def test_default_reporter_follows_fail_fast():
    assert isinstance(default_reporter(), FailureCollector)
    set_config(AssertConfig(fail_fast=True))
    assert isinstance(default_reporter(), RaisingReporter)
