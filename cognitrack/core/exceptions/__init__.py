"""
Core exceptions package.

Exports the base exception class and the error-response helper.
"""

from cognitrack.core.exceptions.base_exceptions import (
    BaseApplicationError,
    ConfigurationError,
    to_error_response,
)

__all__ = [
    "BaseApplicationError",
    "ConfigurationError",
    "to_error_response",
]
