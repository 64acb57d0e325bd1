"""Diagnostic formatter: one line of text per failed predicate."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from assertable.config import get_config
from assertable.errors import ConfigurationError
from assertable.predicates.base import MISSING
from assertable.values.base import SIZED_KINDS, WrappedValue

PREFIX = "assertion failed: "

TEMPLATES: dict[str, str] = {
    "is_equal_to": "expected value of = {actual}, to be equal to {expected}",
    "is_not_equal_to": "expected value of = {actual}, to be other than {expected}",
    "is_empty": "expected {actual} to be empty, but it's not",
    "is_not_empty": "expected {actual} not to be empty, but it is",
    "has_size": "expected {actual} to have size {expected}, but it has size {size}",
    "has_same_size_as": "expected size of {actual} should be same as the size of {expected}, but it isn't",
    "is_shorter_than": "expected value of = {actual}, to be shorter than {expected}",
    "is_longer_than": "expected value of = {actual}, to be longer than {expected}",
    "is_before": "expected value of = {actual}, to be before {expected}",
    "is_after": "expected value of = {actual}, to be after {expected}",
    "is_greater_than": "expected value of = {actual}, to be greater than {expected}",
    "is_greater_or_equal_to": "expected value of = {actual}, to be greater than or equal to {expected}",
    "is_less_than": "expected value of = {actual}, to be less than {expected}",
    "is_less_or_equal_to": "expected value of = {actual}, to be less than or equal to {expected}",
    "contains": "containable [{actual}] should contain [{expected}], but it doesn't",
    "does_not_contain": "containable [{actual}] should not contain [{expected}], but it does",
    "contains_ignoring_case": "containable [{actual}] should contain [{expected}] ignoring case, but it doesn't",
    "contains_only": "containable [{actual}] should contain only [{expected}], but it doesn't",
    "contains_only_once": "containable [{actual}] should contain [{expected}] only once, but it doesn't",
    "starts_with": "expected value of [{actual}] to start with [{expected}], but it doesn't",
    "ends_with": "expected value of [{actual}] to end with [{expected}], but it doesn't",
    "does_not_start_with": "expected value of [{actual}] not to start with [{expected}], but it does",
    "does_not_end_with": "expected value of [{actual}] not to end with [{expected}], but it does",
    "contains_only_digits": "expected {actual} to have only digits, but it's not",
    "contains_whitespaces": "expected {actual} to contain whitespaces, but it doesn't",
    "does_not_contain_any_whitespaces": "expected {actual} not to contain any whitespaces, but it does",
    "is_lower_case": "expected {actual} to be lower case, but it's not",
    "is_upper_case": "expected {actual} to be upper case, but it's not",
    "has_key": "map [{actual}] should have the key [{expected}], but it doesn't",
    "has_value": "map [{actual}] should have the value [{expected}], but it doesn't",
    "has_entry": "map [{actual}] should have the entry [{expected}], but it doesn't",
    "does_not_have_key": "map [{actual}] should not have the key [{expected}], but it does",
    "does_not_have_value": "map [{actual}] should not have the value [{expected}], but it does",
    "does_not_have_entry": "map [{actual}] should not have the entry [{expected}], but it does",
}


def render(value: Any, max_length: int | None = None) -> str:
    """Render a value for a diagnostic, on one line and at most ``max_length`` chars."""
    if max_length is None:
        max_length = get_config().max_value_length
    if isinstance(value, datetime):
        text = value.isoformat()
    elif isinstance(value, (str, bytes)):
        text = repr(value)
    else:
        text = str(value) if type(value).__str__ is not object.__str__ else repr(value)
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    if len(text) > max_length:
        text = text[: max_length - 3] + "..."
    return text


def format_failure(
    relation: str,
    wrapper: WrappedValue,
    expected: Any = MISSING,
    *,
    max_length: int | None = None,
) -> str:
    """Return the diagnostic line for ``relation`` failing on ``wrapper``.

    The actual value is shown after decorators were applied.
    """
    template = TEMPLATES.get(relation)
    if template is None:
        raise ConfigurationError(f"no message template for relation {relation!r}")

    fields = {"actual": render(wrapper.materialize(), max_length)}
    if expected is not MISSING:
        fields["expected"] = render(expected, max_length)
    if "{size}" in template and wrapper.kind in SIZED_KINDS:
        fields["size"] = str(wrapper.size())
    try:
        return PREFIX + template.format(**fields)
    except KeyError as e:
        raise ConfigurationError(f"'{relation}' message needs {e.args[0]!r}") from None
