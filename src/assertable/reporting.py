"""Failure sinks that assertions report their diagnostics to."""

from __future__ import annotations

import logging
import threading
from typing import Protocol, runtime_checkable

from assertable.config import get_config

logger = logging.getLogger(__name__)


@runtime_checkable
class FailureReporter(Protocol):
    def report(self, message: str) -> None:
        """Record a non-fatal failure for the current test."""
        ...


class FailureCollector:
    """Collects failure lines so a test can keep going after one fails."""

    def __init__(self) -> None:
        self._failures: list[str] = []
        self._lock = threading.Lock()

    def report(self, message: str) -> None:
        logger.info(message)
        with self._lock:
            self._failures.append(message)

    @property
    def failures(self) -> list[str]:
        with self._lock:
            return list(self._failures)

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def assert_all(self) -> None:
        """Raise one AssertionError listing every collected failure, if any."""
        failures = self.failures
        if failures:
            count = len(failures)
            header = f"{count} assertion{'s' if count != 1 else ''} failed:"
            raise AssertionError("\n".join([header, *failures]))


class RaisingReporter:
    """Stops the test at the first failure."""

    def report(self, message: str) -> None:
        logger.info(message)
        raise AssertionError(message)


def default_reporter() -> FailureCollector | RaisingReporter:
    if get_config().fail_fast:
        return RaisingReporter()
    return FailureCollector()
