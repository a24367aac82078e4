"""
Logging configuration and utilities
"""

import logging
import sys
from typing import Optional

from ..config import get_settings

PACKAGE_LOGGER = "github_pr_comments"


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Configure the package logger once per run

    Module loggers are children of the package logger and propagate to it,
    so a single stderr handler serves all of them and report lines on
    stdout stay clean. Calling this again replaces the handler.

    Args:
        level: Log level, defaults to LOG_LEVEL
        format_string: Log format string, defaults to the configured one

    Returns:
        Configured package logger
    """
    settings = get_settings()

    log_level = level or settings.log_level
    log_format = format_string or settings.log_format
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger; handlers live on the package logger."""
    return logging.getLogger(name)


class LoggerMixin:
    """Mixin class to add logging capability to other classes"""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class"""
        return logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")
