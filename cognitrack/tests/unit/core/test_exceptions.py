"""
Tests for the exception hierarchy and error-response mapping.
"""

import pytest

from cognitrack.core.exceptions import BaseApplicationError, ConfigurationError, to_error_response
from cognitrack.domain.exceptions import ComputationDegenerateError, InvalidInputError, NotFoundError


@pytest.mark.standalone
class TestExceptions:
    """Tests for the exception classes."""

    def test_str_includes_detail(self):
        error = BaseApplicationError("Something failed", detail="disk full")

        assert str(error) == "Something failed - disk full"

    def test_str_without_detail(self):
        assert str(NotFoundError("Patient p-1 not found")) == "Patient p-1 not found"

    def test_code_override(self):
        assert InvalidInputError(code="GDS_INVALID").code == "GDS_INVALID"

    def test_domain_errors_share_base(self):
        for error_class in (InvalidInputError, NotFoundError, ComputationDegenerateError, ConfigurationError):
            assert issubclass(error_class, BaseApplicationError)

    def test_invalid_input_errors_from_string_detail(self):
        assert InvalidInputError(detail="bad").errors == ["bad"]
        assert InvalidInputError().errors == []


@pytest.mark.standalone
class TestToErrorResponse:
    """Tests for to_error_response."""

    def test_invalid_input_is_client_error(self):
        body = to_error_response(InvalidInputError("Invalid GDS input", detail=["Expected 15 answers, got 3"]))

        assert body == {
            "type": "client_error",
            "code": "INVALID_INPUT",
            "message": "Invalid GDS input",
            "detail": ["Expected 15 answers, got 3"],
        }

    def test_not_found(self):
        body = to_error_response(NotFoundError("Patient p-1 not found"))

        assert body["type"] == "not_found"
        assert "detail" not in body

    def test_unexpected_errors_are_generic(self):
        body = to_error_response(KeyError("secret internals"))

        assert body == {
            "type": "server_error",
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
        }
