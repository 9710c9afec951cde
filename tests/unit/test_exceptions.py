"""
Tests for custom exceptions module.

This module tests the exception classes, their attributes, the inheritance
hierarchy and the RFC 7807 conversion of API errors.
"""

from __future__ import annotations

import pytest

from queryorder.api.schemas.responses import ErrorCode
from queryorder.exceptions import (
    EXIT_CODE_INVALID_ARGS,
    APIError,
    BadRequestError,
    FieldConfigurationError,
    InvalidDirectionError,
    MalformedOrderDirective,
    QueryOrderError,
    UnknownFieldError,
)


class TestQueryOrderError:
    """Tests for base QueryOrderError exception."""

    def test_base_error_with_message(self) -> None:
        """Test base error stores message correctly."""
        error = QueryOrderError("Test error message")
        assert error.message == "Test error message"
        assert str(error) == "Test error message"

    def test_base_error_can_be_raised(self) -> None:
        """Test QueryOrderError can be raised and caught."""
        with pytest.raises(QueryOrderError, match="Test error"):
            raise QueryOrderError("Test error")

    @pytest.mark.parametrize(
        "error_class",
        [
            InvalidDirectionError,
            UnknownFieldError,
            FieldConfigurationError,
            APIError,
            MalformedOrderDirective,
        ],
    )
    def test_all_errors_inherit_from_base(self, error_class: type) -> None:
        """Test every error can be caught as QueryOrderError."""
        assert issubclass(error_class, QueryOrderError)


class TestInputErrors:
    """Tests for request-time input errors."""

    def test_invalid_direction(self) -> None:
        """Test InvalidDirectionError keeps the token."""
        error = InvalidDirectionError("up")
        assert error.token == "up"
        assert error.message == "invalid direction"

    def test_unknown_field(self) -> None:
        """Test UnknownFieldError keeps the name."""
        error = UnknownFieldError("password")
        assert error.name == "password"
        assert error.message == "field 'password' not found"


class TestFieldConfigurationError:
    """Tests for FieldConfigurationError."""

    def test_with_field_name(self) -> None:
        """Test message includes the field name."""
        error = FieldConfigurationError("bad storage", field_name="name")
        assert error.field_name == "name"
        assert error.reason == "bad storage"
        assert error.message == "invalid ordering field 'name': bad storage"

    def test_without_field_name(self) -> None:
        """Test message without a field name."""
        error = FieldConfigurationError("duplicate public names: a")
        assert error.field_name is None
        assert error.message == "invalid ordering field: duplicate public names: a"

    def test_is_not_an_api_error(self) -> None:
        """Test configuration errors are kept apart from request errors."""
        assert not issubclass(FieldConfigurationError, APIError)
        assert not issubclass(MalformedOrderDirective, FieldConfigurationError)


class TestMalformedOrderDirective:
    """Tests for MalformedOrderDirective."""

    def test_attributes(self) -> None:
        """Test raw value, reason and details."""
        error = MalformedOrderDirective("a,b,c", "unknown order field")
        assert error.raw_value == "a,b,c"
        assert error.reason == "unknown order field"
        assert error.details == {
            "field": "orderBy",
            "value": "a,b,c",
            "reason": "unknown order field",
        }
        assert error.message == "invalid orderBy value 'a,b,c': unknown order field"

    def test_is_bad_request(self) -> None:
        """Test the error maps to a 400 with its own code."""
        error = MalformedOrderDirective("x", "parsing fields")
        assert isinstance(error, BadRequestError)
        assert error.status_code == 400
        assert error.error_code is ErrorCode.INVALID_ORDER

    def test_to_api_error(self) -> None:
        """Test conversion to the ApiError schema."""
        api_error = MalformedOrderDirective("x", "parsing fields").to_api_error()
        assert api_error.code == "INVALID_ORDER"
        assert api_error.details is not None
        assert api_error.details["reason"] == "parsing fields"

    def test_to_problem_detail(self) -> None:
        """Test conversion to an RFC 7807 dictionary."""
        problem = MalformedOrderDirective("name,up", "parsing direction").to_problem_detail(
            instance="/api/v1/users"
        )
        assert problem["type"].endswith("/INVALID_ORDER")
        assert problem["title"] == "Invalid Ordering"
        assert problem["status"] == 400
        assert problem["instance"] == "/api/v1/users"
        assert problem["code"] == "INVALID_ORDER"
        assert problem["details"]["value"] == "name,up"

    def test_to_problem_detail_custom_type_base(self) -> None:
        """Test the problem type follows a caller-supplied base URI."""
        problem = MalformedOrderDirective("x", "parsing fields").to_problem_detail(
            instance="/api/v1/users", type_base="https://example.org/e/"
        )
        assert problem["type"] == "https://example.org/e/INVALID_ORDER"


class TestAPIError:
    """Tests for APIError defaults."""

    def test_defaults(self) -> None:
        """Test APIError is a 500 INTERNAL_ERROR by default."""
        error = APIError("boom")
        assert error.status_code == 500
        assert error.error_code is ErrorCode.INTERNAL_ERROR
        assert error.details is None

    def test_bad_request(self) -> None:
        """Test BadRequestError defaults."""
        error = BadRequestError("limit must be positive", details={"field": "limit"})
        assert error.status_code == 400
        assert error.error_code is ErrorCode.BAD_REQUEST


def test_exit_code_invalid_args() -> None:
    """Test CLI exit code for invalid arguments."""
    assert EXIT_CODE_INVALID_ARGS == 2
