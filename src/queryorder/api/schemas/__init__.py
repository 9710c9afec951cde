"""API schema exports."""

from queryorder.api.schemas.responses import (
    ApiError,
    ERROR_TITLES,
    ErrorCode,
    ERROR_TYPE_BASE,
    FieldError,
    ProblemDetail,
    ProblemJSONResponse,
    ValidationProblemDetail,
    get_error_type_uri,
)

__all__ = [
    "ApiError",
    "ERROR_TITLES",
    "ErrorCode",
    "ERROR_TYPE_BASE",
    "FieldError",
    "ProblemDetail",
    "ProblemJSONResponse",
    "ValidationProblemDetail",
    "get_error_type_uri",
]
