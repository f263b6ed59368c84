"""
Logging Constants Module

This module defines constants and enumerations related to logging
to ensure consistent log levels and formats across the application.
"""

from enum import Enum


class LogLevel(str, Enum):
    """
    Standard log levels for application logging.

    These levels align with standard Python logging levels
    but are provided as an enum for type safety and consistency.
    """

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"
DETAILED_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
