"""
Domain exceptions for assessment scoring and analytics.

``InvalidInputError`` stops scoring before any value is computed.
``NotFoundError`` is reported when a referenced patient or assessment is
absent from the injected data source. ``ComputationDegenerateError`` marks
numeric "no signal" situations and is always handled inside the domain.
"""

from cognitrack.core.exceptions.base_exceptions import BaseApplicationError, ErrorDetail


class InvalidInputError(BaseApplicationError):
    """Malformed, out-of-range or duplicate answer data."""

    code = "INVALID_INPUT"
    error_type = "client_error"

    def __init__(
        self,
        message: str = "Invalid assessment input",
        detail: ErrorDetail = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message=message, detail=detail, code=code)

    @property
    def errors(self) -> list[str]:
        """Individual validation problems, when the detail carries a list."""
        if isinstance(self.detail, list):
            return [str(item) for item in self.detail]
        if self.detail:
            return [str(self.detail)]
        return []


class NotFoundError(BaseApplicationError):
    """Referenced patient or assessment does not exist."""

    code = "NOT_FOUND"
    error_type = "not_found"

    def __init__(
        self,
        message: str = "Resource not found",
        detail: ErrorDetail = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message=message, detail=detail, code=code)


class ComputationDegenerateError(BaseApplicationError):
    """A numeric computation has no defined value (e.g. zero variance)."""

    code = "COMPUTATION_DEGENERATE"

    def __init__(
        self,
        message: str = "Degenerate computation",
        detail: ErrorDetail = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message=message, detail=detail, code=code)
