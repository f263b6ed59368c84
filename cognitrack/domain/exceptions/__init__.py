"""
Exception classes for the application domain.

This module exports common exceptions used throughout the domain layer.
"""

from cognitrack.domain.exceptions.base_exceptions import (
    ComputationDegenerateError,
    InvalidInputError,
    NotFoundError,
)

__all__ = [
    "ComputationDegenerateError",
    "InvalidInputError",
    "NotFoundError",
]
