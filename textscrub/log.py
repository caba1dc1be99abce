"""Logging setup for the textscrub entrypoints."""

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "TEXTSCRUB_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
HANDLER_NAME = "textscrub"


def _level_from_env(default: str = "WARNING") -> int:
    value = os.getenv(LOG_LEVEL_ENV, default).upper()
    return getattr(logging, value, logging.WARNING)


def init_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stderr handler to the textscrub logger and return it."""

    resolved = getattr(logging, level.upper(), logging.WARNING) if level else _level_from_env()
    logger = logging.getLogger("textscrub")
    logger.setLevel(resolved)
    if not any(handler.get_name() == HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    return logger
