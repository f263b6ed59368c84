"""
Logging Utility Module.

This module provides logging configuration and utilities for the application,
with special care for PHI protection in log output.
"""

import inspect
import logging
import os
import re
import sys
from datetime import datetime
from functools import wraps

from cognitrack.core.constants import LOG_DATE_FORMAT, LOG_FORMAT, LogLevel


# Patterns redacted from every log message
_PHI_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\b(MRN|medical[_ ]record[_ ]?(?:no|number)?)\s*[:=#]?\s*[\w-]+", re.IGNORECASE), r"\1 [REDACTED]"),
    (re.compile(r"\b(DOB|date[_ ]of[_ ]birth)\s*[:=]?\s*\d{4}-\d{2}-\d{2}", re.IGNORECASE), r"\1 [REDACTED]"),
    (re.compile(r"\b\d{3}-\d{2}-\d{4}\b"), "[REDACTED]"),
]


class PHISanitizingFilter(logging.Filter):
    """Custom logging filter to sanitize PHI from log records."""

    def __init__(self, name: str = "PHISanitizer"):
        super().__init__(name)

    @staticmethod
    def sanitize(text: str) -> str:
        """Redact record numbers, birth dates and SSN-shaped tokens."""
        for pattern, replacement in _PHI_PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        """Sanitize the log record message."""
        original_message = record.getMessage()
        record.msg = self.sanitize(original_message)
        record.args = ()
        return True


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance for the specified name.

    The logger writes to stdout with the application format and the PHI
    sanitizing filter attached.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if it hasn't been done yet
    if not logger.handlers:
        log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
        log_level = getattr(logging, log_level_str, logging.INFO)
        logger.setLevel(log_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        console_handler.addFilter(PHISanitizingFilter())
        logger.addHandler(console_handler)

        # Prevent propagation to root logger to avoid duplicate logs
        logger.propagate = False

    return logger


def log_execution_time(func=None, *, logger=None, level=LogLevel.DEBUG):
    """
    Decorator to log the execution time of a function.
    Can be used with or without arguments:

    @log_execution_time
    def my_func(): pass

    OR

    @log_execution_time(logger=my_logger, level=LogLevel.INFO)
    def my_func(): pass

    Works for both plain and coroutine functions.
    """
    level_to_int = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }

    def actual_decorator(fn):
        log = logger or logging.getLogger(fn.__module__)

        if isinstance(level, LogLevel):
            log_level_int: int = level_to_int.get(level, logging.DEBUG)
        elif isinstance(level, str):
            log_level_int = int(getattr(logging, level.upper(), logging.DEBUG))
        else:
            log_level_int = int(level)

        def _elapsed_ms(start_time: datetime) -> float:
            return (datetime.now() - start_time).total_seconds() * 1000

        if inspect.iscoroutinefunction(fn):

            @wraps(fn)
            async def async_wrapper(*args, **kwargs):
                start_time = datetime.now()
                try:
                    result = await fn(*args, **kwargs)
                except Exception as e:
                    log.exception(
                        f"Exception in '{fn.__name__}' after {_elapsed_ms(start_time):.2f} ms: {e!s}"
                    )
                    raise
                log.log(log_level_int, f"Function '{fn.__name__}' executed in {_elapsed_ms(start_time):.2f} ms")
                return result

            return async_wrapper

        @wraps(fn)
        def wrapper(*args, **kwargs):
            start_time = datetime.now()
            try:
                result = fn(*args, **kwargs)
            except Exception as e:
                log.exception(f"Exception in '{fn.__name__}' after {_elapsed_ms(start_time):.2f} ms: {e!s}")
                raise
            log.log(log_level_int, f"Function '{fn.__name__}' executed in {_elapsed_ms(start_time):.2f} ms")
            return result

        return wrapper

    if func is not None:
        return actual_decorator(func)
    return actual_decorator

