"""Shared plumbing for the fluent assertion classes."""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from assertable.messages import format_failure
from assertable.predicates import MISSING, evaluate
from assertable.reporting import FailureReporter
from assertable.values import Decorator, Kind, WrappedValue, attach_decorator, construct

A = TypeVar("A", bound="Assertable")


class Assertable:
    """Wraps an actual value and reports every failed check to ``reporter``.

    Each check returns the assertable itself, so further checks can be
    chained after a failure; failures accumulate, they never short-circuit.
    """

    kind: ClassVar[Kind]

    def __init__(self, reporter: FailureReporter, actual: Any, *options: Decorator):
        wrapped = construct(actual, self.kind)
        for option in options:
            wrapped = attach_decorator(wrapped, option)
        self.reporter = reporter
        self.actual: WrappedValue = wrapped

    def _check(self: A, relation: str, expected: Any = MISSING) -> A:
        outcome = evaluate(relation, self.actual, expected)
        if not outcome.passed:
            self.reporter.report(format_failure(relation, self.actual, expected))
        return self

    def is_equal_to(self: A, expected: Any) -> A:
        return self._check("is_equal_to", expected)

    def is_not_equal_to(self: A, expected: Any) -> A:
        return self._check("is_not_equal_to", expected)


class SizedAssertions:
    def is_empty(self: A) -> A:
        return self._check("is_empty")

    def is_not_empty(self: A) -> A:
        return self._check("is_not_empty")

    def has_size(self: A, size: int) -> A:
        return self._check("has_size", size)

    def has_same_size_as(self: A, other: Any) -> A:
        return self._check("has_same_size_as", other)

    def is_shorter_than(self: A, other: Any) -> A:
        return self._check("is_shorter_than", other)

    def is_longer_than(self: A, other: Any) -> A:
        return self._check("is_longer_than", other)


class OrderedAssertions:
    def is_greater_than(self: A, expected: Any) -> A:
        return self._check("is_greater_than", expected)

    def is_greater_or_equal_to(self: A, expected: Any) -> A:
        return self._check("is_greater_or_equal_to", expected)

    def is_less_than(self: A, expected: Any) -> A:
        return self._check("is_less_than", expected)

    def is_less_or_equal_to(self: A, expected: Any) -> A:
        return self._check("is_less_or_equal_to", expected)


class ContainerAssertions:
    def contains(self: A, element: Any) -> A:
        return self._check("contains", element)

    def does_not_contain(self: A, element: Any) -> A:
        return self._check("does_not_contain", element)

    def contains_only(self: A, allowed: Any) -> A:
        """Every element of the actual value must be one of ``allowed``."""
        return self._check("contains_only", allowed)
