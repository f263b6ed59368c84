"""
Logging Configuration Module.

This module provides the central logging configuration dictionary for the
application. Every handler carries the PHI sanitizing filter so patient
identifiers never reach log output in plain text.
"""

import logging
import logging.config
from typing import Any

from cognitrack.core.config.settings import get_settings
from cognitrack.core.constants import DETAILED_LOG_FORMAT, LOG_DATE_FORMAT, LOG_FORMAT, LogLevel
from cognitrack.core.exceptions import ConfigurationError


def build_logging_config(log_level: str) -> dict[str, Any]:
    """Build a ``dictConfig`` mapping for the given level."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": LOG_FORMAT,
                "datefmt": LOG_DATE_FORMAT,
            },
            "detailed": {
                "format": DETAILED_LOG_FORMAT,
                "datefmt": LOG_DATE_FORMAT,
            },
        },
        "filters": {
            "phi_sanitizer": {
                "()": "cognitrack.core.utils.logging.PHISanitizingFilter",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "filters": ["phi_sanitizer"],
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "cognitrack": {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def configure_logging(log_level: str | None = None) -> None:
    """
    Apply the application logging configuration.

    Args:
        log_level: Optional override; defaults to ``Settings.LOG_LEVEL``

    Raises:
        ConfigurationError: If the level is not a standard level name
    """
    level = (log_level or get_settings().LOG_LEVEL).upper()
    if level not in {member.value for member in LogLevel}:
        raise ConfigurationError(f"Invalid log level: {level}")
    logging.config.dictConfig(build_logging_config(level))
    logging.getLogger(__name__).debug(f"Logging configured at level {level}")
