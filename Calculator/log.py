"""Logger factory shared by the engine, the UI and the entry point."""

from __future__ import annotations

import logging
import os

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVEL_ENV = "CALCULATOR_LOG_LEVEL"


def get_logger(name: str = "calculator") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "INFO").upper())
        logger.setLevel(level if isinstance(level, int) else logging.INFO)
    return logger


__all__ = ["get_logger"]
