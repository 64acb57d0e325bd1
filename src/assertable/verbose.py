"""Debug log of predicate evaluations and reported failures.

``assertable.predicates`` logs every verdict at DEBUG and
``assertable.reporting`` logs every reported failure at INFO. The debug log
is one file handler on the package logger; ``AssertConfig.debug_log`` picks
which of the two record streams reach it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from assertable.config import AssertConfig, get_config

PACKAGE_LOGGER = "assertable"

LEVELS = {
    "evaluations": logging.DEBUG,
    "failures": logging.INFO,
}

_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_logger(
    debug_file: Path,
    config: AssertConfig | None = None,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Write assertable log records to ``debug_file`` and return the logger.

    With ``debug_log: failures`` the file holds one line per reported failure;
    with ``debug_log: evaluations`` (the default) every predicate verdict is
    written as well. Handlers from an earlier call are closed first.
    """
    config = config or get_config()
    level = LEVELS[config.debug_log]

    logger = logging.getLogger(logger_name)
    close_logger(logger)
    logger.setLevel(level)

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(debug_file, mode="a", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    logger.addHandler(handler)
    return logger


def close_logger(logger: logging.Logger) -> None:
    """Flush and detach every handler installed by ``setup_logger``."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
