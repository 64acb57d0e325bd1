from __future__ import annotations

from assertable.assertions.base import (
    Assertable,
    ContainerAssertions,
    OrderedAssertions,
    SizedAssertions,
)
from assertable.reporting import FailureReporter
from assertable.values import Decorator, Kind


class AssertableString(SizedAssertions, OrderedAssertions, ContainerAssertions, Assertable):
    """Assertions over ``str`` values.

    Options such as ``ignoring_case()`` normalize both the actual value and
    the string parameters of every check.
    """

    kind = Kind.STRING

    def contains_ignoring_case(self, substring: str) -> AssertableString:
        return self._check("contains_ignoring_case", substring)

    def contains_only_once(self, substring: str) -> AssertableString:
        return self._check("contains_only_once", substring)

    def starts_with(self, prefix: str) -> AssertableString:
        return self._check("starts_with", prefix)

    def ends_with(self, suffix: str) -> AssertableString:
        return self._check("ends_with", suffix)

    def does_not_start_with(self, prefix: str) -> AssertableString:
        return self._check("does_not_start_with", prefix)

    def does_not_end_with(self, suffix: str) -> AssertableString:
        return self._check("does_not_end_with", suffix)

    def contains_only_digits(self) -> AssertableString:
        return self._check("contains_only_digits")

    def contains_whitespaces(self) -> AssertableString:
        return self._check("contains_whitespaces")

    def does_not_contain_any_whitespaces(self) -> AssertableString:
        return self._check("does_not_contain_any_whitespaces")

    def is_lower_case(self) -> AssertableString:
        return self._check("is_lower_case")

    def is_upper_case(self) -> AssertableString:
        return self._check("is_upper_case")


def that_string(reporter: FailureReporter, actual: str, *options: Decorator) -> AssertableString:
    """Start a chain of string assertions on ``actual``."""
    return AssertableString(reporter, actual, *options)
