"""Tests for the debug log."""

import logging
from pathlib import Path

import pytest

from assertable.config import AssertConfig
from assertable.predicates import evaluate
from assertable.reporting import FailureCollector
from assertable.values import Kind, construct
from assertable.verbose import close_logger, setup_logger


@pytest.fixture
def debug_log(tmp_path: Path):
    """Set up the package debug log with a given setting and close it afterwards."""
    loggers = []
    path = tmp_path / "logs" / "debug.log"

    def _setup(setting: str) -> Path:
        loggers.append(setup_logger(path, AssertConfig(debug_log=setting)))
        return path

    yield _setup
    for logger in loggers:
        close_logger(logger)


def test_setup_creates_log_file_and_parent(tmp_path: Path):
    debug_file = tmp_path / "nested" / "debug.log"
    logger = setup_logger(debug_file, logger_name="assertable_test_a")

    assert debug_file.exists()
    assert logger.level == logging.DEBUG


def test_failures_setting_raises_level_to_info(tmp_path: Path):
    logger = setup_logger(
        tmp_path / "debug.log",
        AssertConfig(debug_log="failures"),
        logger_name="assertable_test_b",
    )
    assert logger.level == logging.INFO
    assert [h.level for h in logger.handlers] == [logging.INFO]


def test_setup_twice_keeps_a_single_handler(tmp_path: Path):
    setup_logger(tmp_path / "one.log", logger_name="assertable_test_c")
    logger = setup_logger(tmp_path / "two.log", logger_name="assertable_test_c")

    assert len(logger.handlers) == 1
    assert logger.handlers[0].baseFilename.endswith("two.log")


def test_evaluations_setting_records_verdicts_and_failures(debug_log):
    path = debug_log("evaluations")
    evaluate("starts_with", construct("hello", Kind.STRING), "he")
    FailureCollector().report("assertion failed: something")

    content = path.read_text()
    assert "DEBUG assertable.predicates.relations: starts_with: actual='hello' expected='he' passed=True" in content
    assert "INFO assertable.reporting: assertion failed: something" in content


def test_failures_setting_skips_verdicts(debug_log):
    path = debug_log("failures")
    evaluate("starts_with", construct("hello", Kind.STRING), "he")
    FailureCollector().report("assertion failed: something")

    content = path.read_text()
    assert "starts_with" not in content
    assert "assertion failed: something" in content


def test_close_logger_detaches_handlers(tmp_path: Path):
    logger = setup_logger(tmp_path / "debug.log", logger_name="assertable_test_d")
    close_logger(logger)

    assert logger.handlers == []
    assert logger.level == logging.NOTSET
