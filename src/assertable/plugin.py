"""pytest integration: a soft-assertion fixture and session-wide settings.

Registered through the ``pytest11`` entry point, so installing the package is
enough to make the ``soft_assertions`` fixture available.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from assertable.config import AssertConfig, get_config, load_config, set_config
from assertable.reporting import FailureCollector, default_reporter
from assertable.verbose import close_logger, setup_logger

_REPORTER_KEY = pytest.StashKey[object]()
_PREVIOUS_CONFIG_KEY = pytest.StashKey[AssertConfig]()
_LOGGER_KEY = pytest.StashKey[logging.Logger]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("assertable")
    group.addoption(
        "--assertable-config",
        default=None,
        help="YAML file with assertion settings (max_value_length, fail_fast)",
    )
    group.addoption(
        "--assertable-debug-log",
        default=None,
        help="Write predicate evaluations and failures to this file (see debug_log setting)",
    )
    parser.addini("assertable_config", help="YAML file with assertion settings", default="")


def pytest_configure(config: pytest.Config) -> None:
    path = config.getoption("assertable_config") or config.getini("assertable_config")
    if path:
        config_path = Path(path)
        if not config_path.is_absolute():
            config_path = config.rootpath / config_path
        config.stash[_PREVIOUS_CONFIG_KEY] = set_config(load_config(config_path))

    debug_log = config.getoption("assertable_debug_log")
    if debug_log:
        config.stash[_LOGGER_KEY] = setup_logger(Path(debug_log), get_config())


def pytest_unconfigure(config: pytest.Config) -> None:
    previous = config.stash.get(_PREVIOUS_CONFIG_KEY, None)
    if previous is not None:
        set_config(previous)
    logger = config.stash.get(_LOGGER_KEY, None)
    if logger is not None:
        close_logger(logger)


@pytest.fixture
def soft_assertions(request: pytest.FixtureRequest):
    """Reporter whose failures fail the test once its body has finished."""
    reporter = default_reporter()
    request.node.stash[_REPORTER_KEY] = reporter
    return reporter


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item):
    result = yield
    reporter = item.stash.get(_REPORTER_KEY, None)
    if isinstance(reporter, FailureCollector) and reporter.failed:
        pytest.fail("\n".join(reporter.failures), pytrace=False)
    return result
