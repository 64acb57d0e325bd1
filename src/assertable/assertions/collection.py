from __future__ import annotations

from collections.abc import Collection, Sized
from typing import Any

from assertable.assertions.base import Assertable, ContainerAssertions, SizedAssertions
from assertable.reporting import FailureReporter
from assertable.values import Kind


class AssertableSized(SizedAssertions, Assertable):
    """Size-only assertions for anything with a ``len()``."""

    kind = Kind.SIZEABLE


class AssertableCollection(SizedAssertions, ContainerAssertions, Assertable):
    """Assertions over lists, tuples, sets and other collections."""

    kind = Kind.CONTAINABLE

    def contains_only_once(self, element: Any) -> AssertableCollection:
        return self._check("contains_only_once", element)


def that_sized(reporter: FailureReporter, actual: Sized) -> AssertableSized:
    return AssertableSized(reporter, actual)


def that_collection(reporter: FailureReporter, actual: Collection) -> AssertableCollection:
    return AssertableCollection(reporter, actual)
