"""Fluent assertion classes, one per kind of actual value."""

from __future__ import annotations

import numbers
from collections.abc import Collection, Mapping, Sized
from datetime import datetime
from typing import Any

from assertable.assertions.base import Assertable
from assertable.assertions.collection import (
    AssertableCollection,
    AssertableSized,
    that_collection,
    that_sized,
)
from assertable.assertions.datetimes import AssertableTime, that_time
from assertable.assertions.mappings import AssertableMap, that_map
from assertable.assertions.number import AssertableNumber, that_number
from assertable.assertions.string import AssertableString, that_string
from assertable.errors import ConfigurationError
from assertable.reporting import FailureReporter
from assertable.values import Decorator

# Order matters: str is also a Collection, Mapping is also a Collection.
_DISPATCH: list[tuple[Any, type[Assertable]]] = [
    (str, AssertableString),
    (datetime, AssertableTime),
    (Mapping, AssertableMap),
    (Collection, AssertableCollection),
    (Sized, AssertableSized),
]


def that(reporter: FailureReporter, actual: Any, *options: Decorator) -> Assertable:
    """Pick the assertable class matching the type of ``actual``."""
    if isinstance(actual, numbers.Real) and not isinstance(actual, bool):
        return AssertableNumber(reporter, actual, *options)
    for kind_type, cls in _DISPATCH:
        if isinstance(actual, kind_type):
            return cls(reporter, actual, *options)
    raise ConfigurationError(f"no assertions available for {type(actual).__name__} values")


__all__ = [
    "Assertable",
    "AssertableCollection",
    "AssertableMap",
    "AssertableNumber",
    "AssertableSized",
    "AssertableString",
    "AssertableTime",
    "that",
    "that_collection",
    "that_map",
    "that_number",
    "that_sized",
    "that_string",
    "that_time",
]
