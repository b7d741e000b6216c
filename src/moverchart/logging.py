"""Centralized logging configuration using loguru and structlog."""

import logging
import sys

import structlog
from loguru import logger

from moverchart.config import settings

_level = settings.log_level.upper()

# Remove default DEBUG handler; colorize=True keeps colors when piped into CI logs
logger.remove()
logger.add(sys.stderr, level=_level, colorize=True)


def configure_structlog() -> None:
    """Send structlog events to stderr; stdout carries rendered SVG."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(_level, logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


__all__ = ["configure_structlog", "logger"]
