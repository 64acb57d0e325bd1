"""Predicate functions: one semantic relation each, evaluated on a wrapped value."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence, Sized
from datetime import datetime, timezone
from typing import Any

from assertable.errors import ConfigurationError
from assertable.predicates.base import MISSING, PredicateOutcome, get_predicate, predicate
from assertable.values.base import SIZED_KINDS, Kind, MapEntry, WrappedValue

logger = logging.getLogger(__name__)

STRING = (Kind.STRING,)
ORDERED = (Kind.STRING, Kind.TIME, Kind.NUMBER)
CONTAINERS = (Kind.STRING, Kind.MAP, Kind.CONTAINABLE)


def _instant(value: datetime) -> datetime:
    # Naive datetimes are read as UTC.
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def values_equal(actual: Any, expected: Any) -> bool:
    """Equality used by every predicate that compares two values."""
    if isinstance(actual, datetime) and isinstance(expected, datetime):
        return _instant(actual) == _instant(expected)
    if isinstance(actual, Mapping) and isinstance(expected, Mapping):
        return actual.keys() == expected.keys() and all(
            values_equal(actual[key], expected[key]) for key in actual
        )
    if _is_sequence(actual) and _is_sequence(expected):
        return len(actual) == len(expected) and all(
            values_equal(a, e) for a, e in zip(actual, expected)
        )
    return actual == expected


def _text(actual: WrappedValue, parameter: Any, relation: str) -> str:
    if not isinstance(parameter, str):
        raise ConfigurationError(
            f"'{relation}' expects a string parameter, got {type(parameter).__name__}"
        )
    return actual.normalize(parameter)


def _length(actual: WrappedValue, other: Any, relation: str) -> int:
    if not isinstance(other, Sized):
        raise ConfigurationError(
            f"'{relation}' expects a sized parameter, got {type(other).__name__}"
        )
    return len(actual.normalize(other))


def _compare(actual: WrappedValue, expected: Any, relation: str) -> int:
    value = actual.materialize()
    if actual.kind is Kind.TIME:
        if not isinstance(expected, datetime):
            raise ConfigurationError(
                f"'{relation}' expects a datetime parameter, got {type(expected).__name__}"
            )
        value, expected = _instant(value), _instant(expected)
    else:
        expected = actual.normalize(expected)
    try:
        return (value > expected) - (value < expected)
    except TypeError:
        raise ConfigurationError(
            f"'{relation}' cannot order {type(value).__name__} against {type(expected).__name__}"
        ) from None


# --- equality ---


@predicate("is_equal_to", tuple(Kind))
def is_equal_to(actual: WrappedValue, expected: Any) -> bool:
    return values_equal(actual.materialize(), actual.normalize(expected))


@predicate("is_not_equal_to", tuple(Kind))
def is_not_equal_to(actual: WrappedValue, expected: Any) -> bool:
    return not is_equal_to(actual, expected)


# --- emptiness and size ---


@predicate("is_empty", SIZED_KINDS, takes_parameter=False)
def is_empty(actual: WrappedValue) -> bool:
    return actual.size() == 0


@predicate("is_not_empty", SIZED_KINDS, takes_parameter=False)
def is_not_empty(actual: WrappedValue) -> bool:
    return actual.size() > 0


@predicate("has_size", SIZED_KINDS)
def has_size(actual: WrappedValue, size: int) -> bool:
    if not isinstance(size, int) or isinstance(size, bool):
        raise ConfigurationError(f"'has_size' expects an int, got {type(size).__name__}")
    return actual.size() == size


@predicate("has_same_size_as", SIZED_KINDS)
def has_same_size_as(actual: WrappedValue, other: Any) -> bool:
    return actual.size() == _length(actual, other, "has_same_size_as")


@predicate("is_shorter_than", SIZED_KINDS)
def is_shorter_than(actual: WrappedValue, other: Any) -> bool:
    return actual.size() < _length(actual, other, "is_shorter_than")


@predicate("is_longer_than", SIZED_KINDS)
def is_longer_than(actual: WrappedValue, other: Any) -> bool:
    return actual.size() > _length(actual, other, "is_longer_than")


# --- ordering ---


@predicate("is_before", (Kind.TIME,))
def is_before(actual: WrappedValue, expected: datetime) -> bool:
    return _compare(actual, expected, "is_before") < 0


@predicate("is_after", (Kind.TIME,))
def is_after(actual: WrappedValue, expected: datetime) -> bool:
    return _compare(actual, expected, "is_after") > 0


@predicate("is_greater_than", ORDERED)
def is_greater_than(actual: WrappedValue, expected: Any) -> bool:
    return _compare(actual, expected, "is_greater_than") > 0


@predicate("is_greater_or_equal_to", ORDERED)
def is_greater_or_equal_to(actual: WrappedValue, expected: Any) -> bool:
    return _compare(actual, expected, "is_greater_or_equal_to") >= 0


@predicate("is_less_than", ORDERED)
def is_less_than(actual: WrappedValue, expected: Any) -> bool:
    return _compare(actual, expected, "is_less_than") < 0


@predicate("is_less_or_equal_to", ORDERED)
def is_less_or_equal_to(actual: WrappedValue, expected: Any) -> bool:
    return _compare(actual, expected, "is_less_or_equal_to") <= 0


# --- containment ---


@predicate("contains", CONTAINERS)
def contains(actual: WrappedValue, element: Any) -> bool:
    value = actual.materialize()
    if actual.kind is Kind.STRING:
        return _text(actual, element, "contains") in value
    if actual.kind is Kind.MAP:
        return _find_key(value, element) is not MISSING
    return any(values_equal(item, element) for item in value)


@predicate("does_not_contain", CONTAINERS)
def does_not_contain(actual: WrappedValue, element: Any) -> bool:
    return not contains(actual, element)


@predicate("contains_ignoring_case", STRING)
def contains_ignoring_case(actual: WrappedValue, substring: str) -> bool:
    substring = _text(actual, substring, "contains_ignoring_case")
    return substring.lower() in actual.materialize().lower()


@predicate("contains_only", CONTAINERS)
def contains_only(actual: WrappedValue, allowed: Any) -> bool:
    """Every element of the actual value is drawn from ``allowed``.

    This is a subset check, not set equality: ``allowed`` may hold elements
    the actual value never uses, and an empty actual value always passes.
    Strings are checked character by character.
    """
    value = actual.materialize()
    if actual.kind is Kind.STRING:
        characters = set(_text(actual, allowed, "contains_only"))
        return all(ch in characters for ch in value)
    if isinstance(allowed, (str, bytes)) or not isinstance(allowed, Sized):
        raise ConfigurationError(
            f"'contains_only' expects a collection, got {type(allowed).__name__}"
        )
    candidates = list(allowed)
    items = value.keys() if actual.kind is Kind.MAP else value
    return all(any(values_equal(item, c) for c in candidates) for item in items)


@predicate("contains_only_once", (Kind.STRING, Kind.CONTAINABLE))
def contains_only_once(actual: WrappedValue, element: Any) -> bool:
    value = actual.materialize()
    if actual.kind is Kind.STRING:
        return value.count(_text(actual, element, "contains_only_once")) == 1
    return sum(1 for item in value if values_equal(item, element)) == 1


# --- prefixes and suffixes ---


@predicate("starts_with", STRING)
def starts_with(actual: WrappedValue, prefix: str) -> bool:
    return actual.materialize().startswith(_text(actual, prefix, "starts_with"))


@predicate("ends_with", STRING)
def ends_with(actual: WrappedValue, suffix: str) -> bool:
    return actual.materialize().endswith(_text(actual, suffix, "ends_with"))


@predicate("does_not_start_with", STRING)
def does_not_start_with(actual: WrappedValue, prefix: str) -> bool:
    return not starts_with(actual, prefix)


@predicate("does_not_end_with", STRING)
def does_not_end_with(actual: WrappedValue, suffix: str) -> bool:
    return not ends_with(actual, suffix)


# --- character classes ---


@predicate("contains_only_digits", STRING, takes_parameter=False)
def contains_only_digits(actual: WrappedValue) -> bool:
    """Every character is a decimal digit. The empty string passes."""
    return all(ch.isdecimal() for ch in actual.materialize())


@predicate("contains_whitespaces", STRING, takes_parameter=False)
def contains_whitespaces(actual: WrappedValue) -> bool:
    return any(ch.isspace() for ch in actual.materialize())


@predicate("does_not_contain_any_whitespaces", STRING, takes_parameter=False)
def does_not_contain_any_whitespaces(actual: WrappedValue) -> bool:
    return not contains_whitespaces(actual)


@predicate("is_lower_case", STRING, takes_parameter=False)
def is_lower_case(actual: WrappedValue) -> bool:
    # Uncased characters (digits, punctuation) never affect the verdict.
    value = actual.materialize()
    return value == value.lower()


@predicate("is_upper_case", STRING, takes_parameter=False)
def is_upper_case(actual: WrappedValue) -> bool:
    value = actual.materialize()
    return value == value.upper()


# --- map membership ---


def _find_key(mapping: Mapping, key: Any) -> Any:
    """Return the key of ``mapping`` equal to ``key``, or MISSING."""
    try:
        return key if key in mapping else MISSING
    except TypeError:
        # Unhashable keys: scan instead of hashing.
        return next((k for k in mapping if values_equal(k, key)), MISSING)


def _entry(entry: Any) -> MapEntry:
    if isinstance(entry, MapEntry):
        return entry
    if isinstance(entry, tuple) and len(entry) == 2:
        return MapEntry(*entry)
    raise ConfigurationError(f"expected a MapEntry or (key, value) pair, got {entry!r}")


@predicate("has_key", (Kind.MAP,))
def has_key(actual: WrappedValue, key: Any) -> bool:
    return _find_key(actual.materialize(), key) is not MISSING


@predicate("has_value", (Kind.MAP,))
def has_value(actual: WrappedValue, value: Any) -> bool:
    return any(values_equal(v, value) for v in actual.materialize().values())


@predicate("has_entry", (Kind.MAP,))
def has_entry(actual: WrappedValue, entry: Any) -> bool:
    entry = _entry(entry)
    mapping = actual.materialize()
    found = _find_key(mapping, entry.key)
    return found is not MISSING and values_equal(mapping[found], entry.value)


@predicate("does_not_have_key", (Kind.MAP,))
def does_not_have_key(actual: WrappedValue, key: Any) -> bool:
    return not has_key(actual, key)


@predicate("does_not_have_value", (Kind.MAP,))
def does_not_have_value(actual: WrappedValue, value: Any) -> bool:
    return not has_value(actual, value)


@predicate("does_not_have_entry", (Kind.MAP,))
def does_not_have_entry(actual: WrappedValue, entry: Any) -> bool:
    return not has_entry(actual, entry)


def evaluate(relation: str, actual: WrappedValue, expected: Any = MISSING) -> PredicateOutcome:
    """Dispatch ``relation`` to its predicate and wrap the verdict.

    Raises ConfigurationError for unknown relations, for kinds the relation
    is not defined on, and when a parameter is missing or superfluous.
    """
    found = get_predicate(relation)
    if found.takes_parameter and expected is MISSING:
        raise ConfigurationError(f"'{relation}' requires an expected value")
    if not found.takes_parameter and expected is not MISSING:
        raise ConfigurationError(f"'{relation}' does not take an expected value")

    passed = found.check(actual) if expected is MISSING else found.check(actual, expected)
    logger.debug(
        f"{relation}: actual={actual.materialize()!r} expected={expected!r} passed={passed}"
    )
    return PredicateOutcome(
        relation=relation,
        passed=passed,
        actual=actual.materialize(),
        expected=expected,
    )
