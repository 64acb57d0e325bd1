"""Base data structures for the predicate library."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from assertable.errors import ConfigurationError
from assertable.values.base import Kind, WrappedValue


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass
class PredicateOutcome:
    """Result of evaluating a single predicate.

    Attributes:
        relation: Registered relation name (e.g. "contains_only_once").
        passed: Whether the relation held.
        actual: The wrapped value after its decorators were applied.
        expected: The parameter the relation was checked against, or
            ``MISSING`` for parameterless relations such as "is_empty".
    """

    relation: str
    passed: bool
    actual: Any
    expected: Any = MISSING


@dataclass(frozen=True)
class Predicate:
    relation: str
    kinds: frozenset[Kind]
    check: Callable[..., bool]
    takes_parameter: bool = True


_REGISTRY: dict[str, Predicate] = {}


def predicate(relation: str, kinds: Iterable[Kind], *, takes_parameter: bool = True):
    """Register a predicate function under ``relation``.

    The registered function rejects wrappers whose kind is not in ``kinds``
    with a ``ConfigurationError``; a false verdict is returned, never raised.
    """
    allowed = frozenset(kinds)

    def register(fn: Callable[..., bool]) -> Callable[..., bool]:
        @functools.wraps(fn)
        def checked(actual: WrappedValue, *args: Any) -> bool:
            if actual.kind not in allowed:
                supported = ", ".join(sorted(k.value for k in allowed))
                raise ConfigurationError(
                    f"'{relation}' is not defined for {actual.kind.value} values "
                    f"(supported: {supported})"
                )
            return fn(actual, *args)

        _REGISTRY[relation] = Predicate(relation, allowed, checked, takes_parameter)
        return checked

    return register


def get_predicate(relation: str) -> Predicate:
    found = _REGISTRY.get(relation)
    if found is None:
        raise ConfigurationError(
            f"unknown relation: {relation!r}. Available: {', '.join(sorted(_REGISTRY))}"
        )
    return found


def relation_names() -> list[str]:
    return sorted(_REGISTRY)
