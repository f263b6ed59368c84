"""
Base exceptions for the application.

This module defines the foundational exception classes that form the basis of the
application's exception hierarchy.
"""

from typing import Any

ErrorDetail = str | list[str] | list[dict[str, Any]] | dict[str, Any] | None


class BaseApplicationError(Exception):
    """
    Base exception for all application exceptions.

    Attributes:
        message: A human-readable error message
        detail: Additional information about the error
        code: An error code for machine processing
    """

    code: str = "APPLICATION_ERROR"
    error_type: str = "server_error"

    def __init__(
        self,
        message: str,
        detail: ErrorDetail = None,
        code: str | None = None,
    ) -> None:
        self.message = message
        self.detail = detail
        if code is not None:
            self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} - {self.detail}"
        return self.message


class ConfigurationError(BaseApplicationError):
    """Exception raised for configuration errors."""

    code = "CONFIGURATION_ERROR"

    def __init__(
        self,
        message: str = "Configuration error",
        detail: ErrorDetail = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message=message, detail=detail, code=code)


def to_error_response(exc: Exception) -> dict[str, Any]:
    """
    Convert an exception into the error body an outer HTTP layer would emit.

    Application errors keep their type, code and detail. Anything else is
    reported as a generic server error without leaking internals.
    """
    if isinstance(exc, BaseApplicationError):
        body: dict[str, Any] = {
            "type": exc.error_type,
            "code": exc.code,
            "message": exc.message,
        }
        if exc.detail is not None:
            body["detail"] = exc.detail
        return body

    return {
        "type": "server_error",
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
    }
