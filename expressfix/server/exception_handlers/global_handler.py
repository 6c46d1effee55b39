"""
Exception Handlers for the FastAPI Application.

Two handlers are registered:

- ``external_service_exception_handler`` turns failures of the auth or storage
  service into 503 (unreachable) or 502 (bad upstream answer) responses.
- ``global_exception_handler`` catches everything else, logs it with an error
  ID and the request context, and returns a generic 500.
"""

import traceback
import uuid

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from expressfix.core.errors import ExternalServiceError
from expressfix.core.logging_config import get_logger
from expressfix.core.monitoring import log_error

logger = get_logger(__name__)


def _request_context(request: Request) -> dict:
    return {
        "method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params),
        "client": request.client.host if request.client else "unknown",
    }


async def external_service_exception_handler(request: Request, exc: ExternalServiceError) -> JSONResponse:
    """
    Report an upstream service failure.

    Args:
        request: The HTTP request being served
        exc: The error raised by a service client

    Returns:
        503 when the service could not be reached, 502 otherwise
    """
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE if exc.status_code is None else status.HTTP_502_BAD_GATEWAY
    logger.error(
        f"{exc.service} service error in {request.method} {request.url.path}: {exc}",
        extra={
            **_request_context(request),
            "service": exc.service,
            "upstream_status": exc.status_code,
        },
    )
    log_error(type(exc).__name__, str(exc), {"service": exc.service, "path": request.url.path})
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": f"{exc.service.capitalize()} service unavailable",
            "service": exc.service,
            "upstream_status": exc.status_code,
        },
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = uuid.uuid4().hex

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            **_request_context(request),
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )
    log_error(type(exc).__name__, str(exc), {"error_id": error_id, "path": request.url.path})

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(ExternalServiceError, external_service_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
