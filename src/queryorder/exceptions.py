"""
Custom exceptions for the queryorder package.

This module defines the error classes raised while declaring sortable fields
and while parsing caller-supplied ordering directives. Two classes of failure
are kept apart:

- Construction-time programmer errors (``FieldConfigurationError``), raised
  while a service declares its sortable fields at startup.
- Request-time input errors (``InvalidDirectionError``, ``UnknownFieldError``
  and the umbrella ``MalformedOrderDirective``), raised while parsing a
  directive and meant to be surfaced to the caller as a 4xx response.
"""

from __future__ import annotations

from typing import Any

from queryorder.api.schemas.responses import (
    ApiError,
    ERROR_TITLES,
    ERROR_TYPE_BASE,
    ErrorCode,
    get_error_type_uri,
)


class QueryOrderError(Exception):
    """Base exception for all queryorder errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize QueryOrderError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class InvalidDirectionError(QueryOrderError):
    """
    Exception raised when a direction token is not a known direction.

    Attributes
    ----------
    message : str
        Human-readable error message.
    token : str
        The token that failed to match a canonical direction.

    Examples
    --------
    >>> try:
    ...     parse_direction("desc")
    ... except InvalidDirectionError as e:
    ...     print(f"Bad direction: {e.token}")
    """

    def __init__(self, token: str, message: str = "invalid direction") -> None:
        """
        Initialize InvalidDirectionError.

        Parameters
        ----------
        token : str
            The rejected direction token.
        message : str, optional
            Human-readable error message (default: "invalid direction").
        """
        self.token = token
        super().__init__(message)


class UnknownFieldError(QueryOrderError):
    """
    Exception raised when a public field name is not in a FieldSet.

    Attributes
    ----------
    message : str
        Human-readable error message.
    name : str
        The public name that was looked up.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize UnknownFieldError.

        Parameters
        ----------
        name : str
            The public field name that was not found.
        """
        self.name = name
        super().__init__(f"field {name!r} not found")


class FieldConfigurationError(QueryOrderError):
    """
    Exception raised when trusted code declares an invalid sortable field.

    This is a programmer error detected while a service builds its Fields
    and FieldSets at startup. It is never raised while parsing a request.

    Attributes
    ----------
    message : str
        Human-readable error message.
    field_name : str | None
        The public name of the offending field, if known.
    reason : str
        Short description of what is wrong with the declaration.

    Examples
    --------
    >>> Field("name", "user_name; DROP TABLE users")
    Traceback (most recent call last):
        ...
    queryorder.exceptions.FieldConfigurationError: ...
    """

    def __init__(self, reason: str, field_name: str | None = None) -> None:
        """
        Initialize FieldConfigurationError.

        Parameters
        ----------
        reason : str
            What is wrong with the declaration.
        field_name : str | None, optional
            The public name of the offending field (default: None).
        """
        self.reason = reason
        self.field_name: str | None = field_name
        if field_name is None:
            message = f"invalid ordering field: {reason}"
        else:
            message = f"invalid ordering field {field_name!r}: {reason}"
        super().__init__(message)


# =============================================================================
# API Layer Exceptions
# =============================================================================


class APIError(QueryOrderError):
    """Base exception for API layer errors.

    Attributes
    ----------
    status_code : int
        HTTP status code for the error response (default: 500).
    error_code : ErrorCode
        Machine-readable error code for API consumers.
    message : str
        Human-readable error message.
    details : dict[str, Any] | None
        Additional error context.
    """

    status_code: int = 500
    _error_code_value: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize APIError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        details : dict[str, Any] | None, optional
            Additional error context (default: None).
        """
        self.details = details
        super().__init__(message)

    @property
    def error_code(self) -> ErrorCode:
        """Get the error code as an ErrorCode enum."""
        return ErrorCode(self._error_code_value)

    def to_api_error(self) -> ApiError:
        """Convert to API response schema.

        Returns
        -------
        ApiError
            Pydantic model suitable for JSON serialization.
        """
        return ApiError(
            code=self.error_code.value,
            message=self.message,
            details=self.details,
        )

    def to_problem_detail(
        self, instance: str, type_base: str = ERROR_TYPE_BASE
    ) -> dict[str, Any]:
        """Convert to RFC 7807 Problem Detail dictionary.

        Parameters
        ----------
        instance : str
            URI reference of the specific occurrence (e.g., "/api/v1/users").
        type_base : str, optional
            Base URI for the problem type (default: ERROR_TYPE_BASE).

        Returns
        -------
        dict[str, Any]
            Dictionary with RFC 7807 fields suitable for ProblemDetail model.
        """
        return {
            "type": get_error_type_uri(self.error_code, type_base),
            "title": ERROR_TITLES.get(self.error_code, "Error"),
            "status": self.status_code,
            "detail": self.message,
            "instance": instance,
            "code": self.error_code.value,
            "details": self.details,
        }


class BadRequestError(APIError):
    """Invalid request parameters (400).

    Examples
    --------
    >>> raise BadRequestError(
    ...     message="limit must be positive",
    ...     details={"field": "limit"}
    ... )
    """

    status_code: int = 400
    _error_code_value: str = "BAD_REQUEST"


class MalformedOrderDirective(BadRequestError):
    """An ordering directive failed validation (400).

    Wraps the reason a caller-supplied directive was rejected together with
    the raw value exactly as it was received. The reason is one of
    ``"parsing fields"``, ``"parsing direction"`` or ``"unknown order
    field"``.

    Attributes
    ----------
    raw_value : str
        The directive as supplied by the caller.
    reason : str
        Short machine-readable reason.
    status_code : int
        Always 400 for this exception.
    error_code : ErrorCode
        Always INVALID_ORDER for this exception.

    Examples
    --------
    >>> try:
    ...     parse("name,sideways", fields, default)
    ... except MalformedOrderDirective as e:
    ...     print(e.reason)
    parsing direction
    """

    _error_code_value: str = "INVALID_ORDER"

    def __init__(self, raw_value: str, reason: str, field: str = "orderBy") -> None:
        """
        Initialize MalformedOrderDirective.

        Parameters
        ----------
        raw_value : str
            The directive as supplied by the caller.
        reason : str
            Short machine-readable reason.
        field : str, optional
            Name of the request field the directive came from
            (default: "orderBy").
        """
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(
            message=f"invalid {field} value {raw_value!r}: {reason}",
            details={"field": field, "value": raw_value, "reason": reason},
        )


# Exit codes for CLI integration
EXIT_CODE_SUCCESS = 0
EXIT_CODE_GENERAL_ERROR = 1
EXIT_CODE_INVALID_ARGS = 2
