"""Tests for the diagnostic formatter."""

from datetime import datetime, timezone

import pytest

from assertable.config import AssertConfig, set_config
from assertable.errors import ConfigurationError
from assertable.messages import PREFIX, TEMPLATES, format_failure, render
from assertable.predicates import relation_names
from assertable.values import Kind, MapEntry, attach_decorator, construct, ignoring_case


def test_every_relation_has_a_template():
    assert set(relation_names()) == set(TEMPLATES)


def test_failure_shows_decorated_actual_and_expected():
    wrapped = attach_decorator(construct("HeLLo", Kind.STRING), ignoring_case())
    message = format_failure("is_equal_to", wrapped, "world")
    assert message == "assertion failed: expected value of = 'hello', to be equal to 'world'"


def test_parameterless_template():
    message = format_failure("contains_only_digits", construct("12a", Kind.STRING))
    assert message == "assertion failed: expected '12a' to have only digits, but it's not"


def test_has_size_reports_actual_size():
    message = format_failure("has_size", construct([1, 2, 3], Kind.CONTAINABLE), 2)
    assert message.endswith("to have size 2, but it has size 3")


def test_entry_rendering():
    message = format_failure("has_entry", construct({"a": 1}, Kind.MAP), MapEntry("a", 2))
    assert message == (
        "assertion failed: map [{'a': 1}] should have the entry ['a': 2], but it doesn't"
    )


def test_time_renders_as_iso_format():
    t1 = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    t2 = datetime(2023, 1, 1, tzinfo=timezone.utc)
    message = format_failure("is_before", construct(t1, Kind.TIME), t2)
    assert "2024-01-02T03:04:05+00:00" in message
    assert "2023-01-01T00:00:00+00:00" in message


def test_failure_is_a_single_line():
    message = format_failure("contains", construct("line one\nline two", Kind.STRING), "three")
    assert "\n" not in message
    assert message.startswith(PREFIX)


def test_long_values_are_truncated_to_configured_length():
    set_config(AssertConfig(max_value_length=20))
    message = format_failure("is_empty", construct("x" * 100, Kind.STRING))
    rendered = message.removeprefix("assertion failed: expected ").split(" to be empty")[0]
    assert len(rendered) == 20
    assert rendered.endswith("...")


def test_render_max_length_override():
    assert render("abcdefghijklmnop", max_length=10) == "'abcdef..."


def test_unknown_relation_is_configuration_error():
    with pytest.raises(ConfigurationError, match="no message template"):
        format_failure("is_bogus", construct("x", Kind.STRING), "y")


def test_missing_expected_for_template_that_needs_it():
    with pytest.raises(ConfigurationError, match="expected"):
        format_failure("contains", construct("x", Kind.STRING))
