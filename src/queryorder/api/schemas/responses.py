"""API error response schemas (RFC 7807)."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from starlette.responses import JSONResponse


class ErrorCode(str, Enum):
    """Standardized error codes for API responses.

    4xx Client Errors:
        BAD_REQUEST: Invalid request parameters (400)
        INVALID_ORDER: Ordering directive rejected (400)
        VALIDATION_ERROR: Request validation failed (422)

    5xx Server Errors:
        INTERNAL_ERROR: Unexpected server error (500)
    """

    # 4xx Client Errors
    BAD_REQUEST = "BAD_REQUEST"
    INVALID_ORDER = "INVALID_ORDER"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # 5xx Server Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


# RFC 7807 Constants and Utilities
ERROR_TYPE_BASE: str = "https://queryorder.dev/errors"
"""Default base URI for constructing RFC 7807 type URIs."""


def get_error_type_uri(code: ErrorCode, base: str = ERROR_TYPE_BASE) -> str:
    """Generate RFC 7807 type URI from error code.

    Parameters
    ----------
    code : ErrorCode
        The error code to generate a URI for.
    base : str, optional
        Base URI for problem types (default: ERROR_TYPE_BASE).

    Returns
    -------
    str
        The full RFC 7807 type URI for the error code.

    Examples
    --------
    >>> get_error_type_uri(ErrorCode.INVALID_ORDER)
    'https://queryorder.dev/errors/INVALID_ORDER'
    """
    return f"{base.rstrip('/')}/{code.value}"


ERROR_TITLES: dict[ErrorCode, str] = {
    ErrorCode.BAD_REQUEST: "Bad Request",
    ErrorCode.INVALID_ORDER: "Invalid Ordering",
    ErrorCode.VALIDATION_ERROR: "Validation Error",
    ErrorCode.INTERNAL_ERROR: "Internal Server Error",
}
"""Mapping from ErrorCode to human-readable RFC 7807 title."""


class ApiError(BaseModel):
    """Standard error body."""

    model_config = ConfigDict(strict=True)

    code: str  # Machine-readable error code (e.g., INVALID_ORDER)
    message: str  # Human-readable message
    details: dict[str, Any] | None = None


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details response for API errors.

    Attributes
    ----------
    type : str
        URI identifying the problem type.
    title : str
        Short human-readable summary of the problem type.
    status : int
        HTTP status code (4xx or 5xx).
    detail : str
        Human-readable explanation of the specific problem occurrence.
    instance : str
        URI reference of the specific occurrence.
    code : str
        Application-specific error code from ErrorCode enum.
    details : dict[str, Any] | None
        Machine-readable context, e.g. the rejected ``orderBy`` value and
        the reason it was rejected.
    """

    type: str = Field(
        ...,
        description="URI identifying the problem type",
        examples=["https://queryorder.dev/errors/INVALID_ORDER"],
    )
    title: str = Field(
        ...,
        description="Short human-readable summary",
        examples=["Invalid Ordering"],
    )
    status: int = Field(
        ...,
        ge=400,
        le=599,
        description="HTTP status code",
        examples=[400],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation of the problem",
        examples=["invalid orderBy value 'name,up': parsing direction"],
    )
    instance: str = Field(
        ...,
        description="URI reference of the specific occurrence",
        examples=["/api/v1/users"],
    )
    code: str = Field(
        ...,
        description="Application-specific error code",
        examples=["INVALID_ORDER"],
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional machine-readable context",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "https://queryorder.dev/errors/INVALID_ORDER",
                "title": "Invalid Ordering",
                "status": 400,
                "detail": "invalid orderBy value 'name,up': parsing direction",
                "instance": "/api/v1/users",
                "code": "INVALID_ORDER",
                "details": {
                    "field": "orderBy",
                    "value": "name,up",
                    "reason": "parsing direction",
                },
            }
        }
    )


class FieldError(BaseModel):
    """Individual field validation error for RFC 7807 validation responses.

    Attributes
    ----------
    loc : list[str | int]
        Location of the error as a field path (e.g., ["query", "limit"]).
    msg : str
        Human-readable error message.
    type : str
        Error type identifier (e.g., "greater_than_equal").
    """

    loc: list[str | int] = Field(
        ...,
        description="Location of the error (field path)",
        examples=[["query", "limit"]],
    )
    msg: str = Field(
        ...,
        description="Error message",
        examples=["Input should be greater than or equal to 1"],
    )
    type: str = Field(
        ...,
        description="Error type identifier",
        examples=["greater_than_equal"],
    )


class ValidationProblemDetail(ProblemDetail):
    """RFC 7807 Problem Details with field-level errors for 422 responses."""

    errors: list[FieldError] = Field(
        ...,
        description="List of field-level validation errors",
    )


class ProblemJSONResponse(JSONResponse):
    """JSONResponse subclass for RFC 7807 Problem Details.

    Sets the ``application/problem+json`` media type.
    """

    media_type = "application/problem+json"
