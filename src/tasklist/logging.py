from __future__ import annotations

import sys
from logging import DEBUG, Formatter, getLevelName, getLogger, INFO, Logger, NOTSET, StreamHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quart import Quart  # noqa: F401

serving_handler = StreamHandler(sys.stdout)
serving_handler.setFormatter(Formatter("[%(asctime)s] %(message)s"))


def _resolve_level(value: object) -> int:
    if isinstance(value, int):
        return value
    level = getLevelName(str(value).upper())
    return level if isinstance(level, int) else INFO


def create_logger(app: Quart) -> Logger:
    """Apply ``LOG_LEVEL`` to the app logger.

    Quart names the logger after the app and attaches its own handler, so
    the store (``tasklist``) and the console (``tasklist.console``) log
    into one tree. Debug mode always wins over the configured level.
    """
    logger = app.logger

    if app.debug:
        logger.setLevel(DEBUG)
    elif logger.level == NOTSET:
        logger.setLevel(_resolve_level(app.config.get("LOG_LEVEL", INFO)))

    return logger


def create_serving_logger() -> Logger:
    """Create a logger for the startup banner.

    This creates a logger named tasklist.serving that writes plain lines
    to stdout.
    """
    logger = getLogger("tasklist.serving")

    if logger.level == NOTSET:
        logger.setLevel(INFO)

    if serving_handler not in logger.handlers:
        logger.addHandler(serving_handler)
        logger.propagate = False

    return logger
