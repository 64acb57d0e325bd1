"""Errors raised for misuse of the assertion engine."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when an assertion is wired up incorrectly.

    Kind/predicate mismatches, decorators attached to the wrong kind and
    unknown relation names all end up here. This is never used for a
    predicate that simply evaluated to false.
    """

    def __init__(self, message: str):
        super().__init__(f"configuration error: {message}")
