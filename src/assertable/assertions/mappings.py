from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from assertable.assertions.base import Assertable, ContainerAssertions, SizedAssertions
from assertable.reporting import FailureReporter
from assertable.values import Kind, MapEntry


class AssertableMap(SizedAssertions, ContainerAssertions, Assertable):
    """Assertions over mappings. ``contains`` and ``contains_only`` look at keys."""

    kind = Kind.MAP

    def has_key(self, key: Any) -> AssertableMap:
        return self._check("has_key", key)

    def has_value(self, value: Any) -> AssertableMap:
        return self._check("has_value", value)

    def has_entry(self, key: Any, value: Any) -> AssertableMap:
        return self._check("has_entry", MapEntry(key, value))

    def does_not_have_key(self, key: Any) -> AssertableMap:
        return self._check("does_not_have_key", key)

    def does_not_have_value(self, value: Any) -> AssertableMap:
        return self._check("does_not_have_value", value)

    def does_not_have_entry(self, key: Any, value: Any) -> AssertableMap:
        return self._check("does_not_have_entry", MapEntry(key, value))


def that_map(reporter: FailureReporter, actual: Mapping) -> AssertableMap:
    return AssertableMap(reporter, actual)
