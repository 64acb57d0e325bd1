"""String decorators applied to a wrapped value before predicates run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from assertable.values.base import Kind


@dataclass(frozen=True)
class Decorator:
    """A named, pure transformation of a wrapped value.

    Attributes:
        name: Identifier shown in configuration errors.
        transform: Deterministic function of the materialized value.
        kinds: Kinds of wrapped value the transform is defined for.
    """

    name: str
    transform: Callable[[Any], Any]
    kinds: frozenset[Kind] = frozenset({Kind.STRING})

    def __call__(self, value: Any) -> Any:
        return self.transform(value)


def _remove_whitespaces(value: str) -> str:
    return "".join(ch for ch in value if not ch.isspace())


def ignoring_case() -> Decorator:
    """Compare strings in their lower-case form."""
    return Decorator(name="ignoring_case", transform=str.lower)


def ignoring_whitespaces() -> Decorator:
    """Drop every whitespace character before comparing."""
    return Decorator(name="ignoring_whitespaces", transform=_remove_whitespaces)
