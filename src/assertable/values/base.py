"""Wrapped values: the normalized actual value every predicate runs against."""

from __future__ import annotations

import numbers
from collections.abc import Collection, Mapping, Sized
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from functools import reduce
from typing import Any, TYPE_CHECKING

from assertable.errors import ConfigurationError

if TYPE_CHECKING:
    from assertable.values.decorators import Decorator


class Kind(str, Enum):
    STRING = "string"
    TIME = "time"
    MAP = "map"
    SIZEABLE = "sizeable"
    CONTAINABLE = "containable"
    NUMBER = "number"


SIZED_KINDS = frozenset({Kind.STRING, Kind.MAP, Kind.SIZEABLE, Kind.CONTAINABLE})


def _is_number(raw: Any) -> bool:
    return isinstance(raw, numbers.Real) and not isinstance(raw, bool)


_CLASSIFIERS = {
    Kind.STRING: lambda raw: isinstance(raw, str),
    Kind.TIME: lambda raw: isinstance(raw, datetime),
    Kind.MAP: lambda raw: isinstance(raw, Mapping),
    Kind.SIZEABLE: lambda raw: isinstance(raw, Sized),
    Kind.CONTAINABLE: lambda raw: isinstance(raw, Collection),
    Kind.NUMBER: _is_number,
}


@dataclass(frozen=True)
class MapEntry:
    """A key/value pair used by the map entry predicates."""

    key: Any
    value: Any

    def __str__(self) -> str:
        return f"{self.key!r}: {self.value!r}"


@dataclass(frozen=True)
class WrappedValue:
    """An actual value of a known kind plus the decorators applied to it.

    Attributes:
        raw: The value as supplied by the caller.
        kind: Semantic kind the value is asserted as.
        decorators: Transformations applied to ``raw`` in attachment order
            before any predicate sees it.
    """

    raw: Any
    kind: Kind
    decorators: tuple[Decorator, ...] = ()

    def materialize(self) -> Any:
        """Return the value after applying every decorator in order."""
        return reduce(lambda value, decorator: decorator(value), self.decorators, self.raw)

    def normalize(self, parameter: Any) -> Any:
        """Apply this wrapper's decorators to a string parameter.

        Lets ``ignoring_case`` compare both sides in the same canonical form.
        Anything that is not a string is returned untouched.
        """
        if self.kind is not Kind.STRING or not isinstance(parameter, str):
            return parameter
        return reduce(lambda value, decorator: decorator(value), self.decorators, parameter)

    def size(self) -> int:
        """Characters for strings, elements for maps and collections."""
        if self.kind not in SIZED_KINDS:
            raise ConfigurationError(f"a {self.kind.value} value has no size")
        return len(self.materialize())

    def attach(self, decorator: Decorator) -> WrappedValue:
        if self.kind not in decorator.kinds:
            raise ConfigurationError(
                f"decorator '{decorator.name}' cannot be applied to a {self.kind.value} value"
            )
        return replace(self, decorators=self.decorators + (decorator,))


def construct(raw: Any, kind: Kind | str) -> WrappedValue:
    """Wrap ``raw`` as a value of ``kind`` with an empty decorator chain."""
    try:
        kind = Kind(kind)
    except ValueError:
        raise ConfigurationError(f"unknown kind {kind!r}") from None
    if not _CLASSIFIERS[kind](raw):
        raise ConfigurationError(
            f"{type(raw).__name__} value {raw!r} cannot be asserted as {kind.value}"
        )
    return WrappedValue(raw=raw, kind=kind)


def attach_decorator(wrapper: WrappedValue, decorator: Decorator) -> WrappedValue:
    """Return a new wrapper with ``decorator`` appended to the chain."""
    return wrapper.attach(decorator)
