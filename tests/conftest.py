"""Pytest configuration and fixtures."""

import logging

import pytest

from assertable.config import AssertConfig, set_config
from assertable.reporting import FailureCollector


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers added to assertable loggers so log files don't leak between tests."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("assertable_test"):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()
            del logging.Logger.manager.loggerDict[name]


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default settings."""
    previous = set_config(AssertConfig())
    yield
    set_config(previous)


@pytest.fixture
def collector():
    return FailureCollector()
