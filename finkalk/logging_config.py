"""Logging setup for the front end and report export.

The calculation core in ``core/`` does not log; invalid input surfaces as an
exception and regulatory findings as data.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ENV_LOG_LEVEL = "FINKALK_LOG_LEVEL"

# Loggers configured by configure_logging(); module loggers named under these
# prefixes inherit the handler.
LOGGER_NAMES = ("finkalk", "export", "ui", "app")


def _level(level: Optional[str]) -> int:
    name = level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a single stdout handler to the application loggers.

    Calling it again replaces the handler instead of adding a second one.
    """

    log_level = _level(level)
    formatter = logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(log_level)
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (typically ``__name__``)."""
    return logging.getLogger(name)
