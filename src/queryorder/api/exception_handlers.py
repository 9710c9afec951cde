"""Exception handlers for FastAPI with RFC 7807 compliance.

Converts queryorder exceptions raised while handling a request, most notably
``MalformedOrderDirective``, into RFC 7807 Problem Details responses. The
problem ``type`` URIs are built from the app's ``settings.error_type_base``.

RFC 7807 Reference: https://tools.ietf.org/html/rfc7807
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from queryorder.api.deps import get_app_settings
from queryorder.api.schemas.responses import (
    ERROR_TITLES,
    ERROR_TYPE_BASE,
    ErrorCode,
    FieldError,
    ProblemDetail,
    ProblemJSONResponse,
    ValidationProblemDetail,
    get_error_type_uri,
)
from queryorder.exceptions import APIError, MalformedOrderDirective

logger = logging.getLogger(__name__)

MAX_DETAIL_LENGTH = 4096
"""Maximum allowed length for detail messages before truncation."""

TRUNCATION_SUFFIX = "... (truncated)"
"""Suffix appended to truncated detail messages."""


def _truncate_detail(detail: str) -> str:
    """Truncate detail message if it exceeds maximum length."""
    if len(detail) <= MAX_DETAIL_LENGTH:
        return detail
    truncate_at = MAX_DETAIL_LENGTH - len(TRUNCATION_SUFFIX)
    return detail[:truncate_at] + TRUNCATION_SUFFIX


def _safe_problem_response(
    request: Request,
    code: ErrorCode,
    status: int,
    detail: str,
    details: dict[str, Any] | None = None,
) -> ProblemJSONResponse:
    """Create ProblemJSONResponse with meta-error fallback.

    If building the problem body fails, a minimal hardcoded RFC 7807
    response is returned so the client always receives a valid error.

    Parameters
    ----------
    request : Request
        The request being answered; supplies the instance path and the
        app's error type base.
    code : ErrorCode
        The error code for the problem.
    status : int
        HTTP status code for the response.
    detail : str
        Human-readable explanation of the problem.
    details : dict[str, Any] | None, optional
        Machine-readable context for the problem (default: None).

    Returns
    -------
    ProblemJSONResponse
        RFC 7807 compliant JSON response.
    """
    instance = str(request.url.path)
    try:
        type_base = get_app_settings(request).error_type_base
        problem = ProblemDetail(
            type=get_error_type_uri(code, type_base),
            title=ERROR_TITLES.get(code, "Error"),
            status=status,
            detail=_truncate_detail(detail),
            instance=instance,
            code=code.value,
            details=details,
        )
        return ProblemJSONResponse(
            content=problem.model_dump(),
            status_code=status,
        )
    except Exception as e:
        logger.error("Error serializing error response: %s", e, exc_info=True)
        return ProblemJSONResponse(
            content={
                "type": get_error_type_uri(ErrorCode.INTERNAL_ERROR, ERROR_TYPE_BASE),
                "title": "Internal Server Error",
                "status": 500,
                "detail": "An unexpected error occurred",
                "instance": instance,
                "code": "INTERNAL_ERROR",
            },
            status_code=500,
        )


async def api_error_handler(request: Request, exc: APIError) -> ProblemJSONResponse:
    """Handle APIError subclasses and convert to RFC 7807 Problem Detail.

    A rejected ordering directive is logged at WARNING with the raw value
    and reason; the response carries both in ``details``.

    Parameters
    ----------
    request : Request
        The incoming FastAPI request.
    exc : APIError
        The APIError exception that was raised.

    Returns
    -------
    ProblemJSONResponse
        RFC 7807 compliant JSON response with the error's status code.
    """
    if isinstance(exc, MalformedOrderDirective):
        logger.warning(
            "Rejected ordering directive %r on %s: %s",
            exc.raw_value,
            request.url.path,
            exc.reason,
        )

    return _safe_problem_response(
        request,
        code=exc.error_code,
        status=exc.status_code,
        detail=exc.message,
        details=exc.details,
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> ProblemJSONResponse:
    """Handle Pydantic RequestValidationError and convert to RFC 7807 format.

    Parameters
    ----------
    request : Request
        The incoming FastAPI request.
    exc : RequestValidationError
        The Pydantic validation error.

    Returns
    -------
    ProblemJSONResponse
        RFC 7807 compliant JSON response with status 422 and errors array.
    """
    instance = str(request.url.path)

    try:
        errors = [
            FieldError(
                loc=list(error.get("loc", [])),
                msg=error.get("msg", ""),
                type=error.get("type", ""),
            )
            for error in exc.errors()
        ]
        type_base = get_app_settings(request).error_type_base

        validation_problem = ValidationProblemDetail(
            type=get_error_type_uri(ErrorCode.VALIDATION_ERROR, type_base),
            title=ERROR_TITLES[ErrorCode.VALIDATION_ERROR],
            status=422,
            detail="Request validation failed",
            instance=instance,
            code=ErrorCode.VALIDATION_ERROR.value,
            errors=errors,
        )

        return ProblemJSONResponse(
            content=validation_problem.model_dump(),
            status_code=422,
        )
    except Exception as e:
        logger.error("Error serializing validation error response: %s", e, exc_info=True)
        return ProblemJSONResponse(
            content={
                "type": get_error_type_uri(ErrorCode.VALIDATION_ERROR, ERROR_TYPE_BASE),
                "title": "Validation Error",
                "status": 422,
                "detail": "Request validation failed",
                "instance": instance,
                "code": "VALIDATION_ERROR",
                "errors": [],
            },
            status_code=422,
        )


async def generic_error_handler(
    request: Request, exc: Exception
) -> ProblemJSONResponse:
    """Handle unexpected exceptions and convert to RFC 7807 Problem Detail.

    Internal error details are not exposed to the client. The full stack
    trace is logged.
    """
    logger.exception("Unhandled exception: %s", exc)

    return _safe_problem_response(
        request,
        code=ErrorCode.INTERNAL_ERROR,
        status=500,
        detail="An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the queryorder exception handlers on a FastAPI app.

    Parameters
    ----------
    app : FastAPI
        The FastAPI application instance.

    Examples
    --------
    >>> from fastapi import FastAPI
    >>> app = FastAPI()
    >>> register_exception_handlers(app)
    """
    # APIError and subclasses, including MalformedOrderDirective
    app.add_exception_handler(APIError, api_error_handler)  # type: ignore[arg-type]

    # Pydantic request validation
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]

    # Catch-all
    app.add_exception_handler(Exception, generic_error_handler)
