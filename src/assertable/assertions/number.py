from __future__ import annotations

from numbers import Real

from assertable.assertions.base import Assertable, OrderedAssertions
from assertable.reporting import FailureReporter
from assertable.values import Kind


class AssertableNumber(OrderedAssertions, Assertable):
    kind = Kind.NUMBER


def that_number(reporter: FailureReporter, actual: Real) -> AssertableNumber:
    return AssertableNumber(reporter, actual)
