from __future__ import annotations

from datetime import datetime

from assertable.assertions.base import Assertable, OrderedAssertions
from assertable.reporting import FailureReporter
from assertable.values import Kind


class AssertableTime(OrderedAssertions, Assertable):
    """Assertions over ``datetime`` values, compared as instants.

    Naive datetimes are treated as UTC.
    """

    kind = Kind.TIME

    def is_same_as(self, expected: datetime) -> AssertableTime:
        return self._check("is_equal_to", expected)

    def is_not_the_same_as(self, expected: datetime) -> AssertableTime:
        return self._check("is_not_equal_to", expected)

    def is_before(self, expected: datetime) -> AssertableTime:
        return self._check("is_before", expected)

    def is_after(self, expected: datetime) -> AssertableTime:
        return self._check("is_after", expected)


def that_time(reporter: FailureReporter, actual: datetime) -> AssertableTime:
    return AssertableTime(reporter, actual)
