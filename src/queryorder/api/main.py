"""FastAPI application factory with ordering error handling."""

import logging
import time

from fastapi import FastAPI, Request
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from queryorder.api.exception_handlers import register_exception_handlers
from queryorder.config.settings import Settings, get_settings
from queryorder.logging_config import configure_logging

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """
    Log each request with its status code and timing.

    Uses INFO for 2xx/3xx, WARNING for 4xx and ERROR for 5xx responses.
    """
    start_time = time.perf_counter()
    method = request.method
    path = request.url.path

    response = await call_next(request)

    duration = time.perf_counter() - start_time
    status_code = response.status_code

    if status_code >= 500:
        log_level = logging.ERROR
    elif status_code >= 400:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    logger.log(
        log_level,
        "Response: %s %s - %d (%.3fs)",
        method,
        path,
        status_code,
        duration,
    )
    return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create a FastAPI app that reports rejected directives as RFC 7807."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.settings = settings
    register_exception_handlers(app)
    app.middleware("http")(log_requests)
    return app
