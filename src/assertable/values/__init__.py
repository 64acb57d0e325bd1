"""Wrapped values and the decorators that normalize them."""

from assertable.values.base import MapEntry, Kind, WrappedValue, attach_decorator, construct
from assertable.values.decorators import Decorator, ignoring_case, ignoring_whitespaces

__all__ = [
    "Decorator",
    "Kind",
    "MapEntry",
    "WrappedValue",
    "attach_decorator",
    "construct",
    "ignoring_case",
    "ignoring_whitespaces",
]
