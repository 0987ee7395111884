"""Logging helpers for the polygonrest package."""

from __future__ import annotations

import logging

# Below DEBUG; used for the per-request URI line.
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "polygonrest"

_CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)


def configure_console_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling it again only updates the level; no duplicate handlers are added.
    """
    logger = get_logger()
    logger.setLevel(level)
    has_console = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )
    if not has_console:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        logger.addHandler(handler)
    return logger
