"""Logging utilities built on top of :mod:`loguru`."""
from __future__ import annotations

import logging
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


class InterceptHandler(logging.Handler):
    """Forward standard-library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = "INFO") -> None:
    """Configure loguru and route stdlib loggers through it.

    Logs are written to stderr; stdout is reserved for scan progress lines.
    """

    logger.remove()
    logger.add(lambda msg: print(msg, end="", file=sys.stderr), level=level.upper(), format=LOG_FORMAT)
    logging.basicConfig(handlers=[InterceptHandler()], level=level.upper(), force=True)
    # discovery-cache chatter from the Drive client is noise at INFO
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a standard-library logger tied to loguru."""

    return logging.getLogger(name or __name__)
