"""
Logfire Middleware for FastAPI.

Times every request and reports it through ``log_api_request``. Adds the
``X-Process-Time`` header (milliseconds) and an ``X-Request-ID`` header, which
echoes the client's request id or a generated one.
"""

import time
import uuid
from typing import Callable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from expressfix.core.logging_config import get_logger
from expressfix.core.monitoring import log_api_request
from expressfix.server.core.config import settings

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class LogfireMiddleware(BaseHTTPMiddleware):
    """Middleware for tracing API requests with Logfire."""

    def __init__(self, app: ASGIApp, slow_request_ms: Optional[float] = None) -> None:
        super().__init__(app)
        self.slow_request_ms = settings.slow_request_ms if slow_request_ms is None else slow_request_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process the request and log metrics.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware/handler

        Returns:
            The HTTP response
        """
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

        request.state.start_time = start_time
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"API request failed: {method} {path}",
                exc_info=True,
                extra={
                    "method": method,
                    "path": path,
                    "request_id": request_id,
                    "duration_ms": duration_ms,
                    "error": str(e),
                },
            )
            log_api_request(method=method, path=path, status_code=500, duration_ms=duration_ms)
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        log_api_request(method=method, path=path, status_code=response.status_code, duration_ms=duration_ms)

        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"
        response.headers[REQUEST_ID_HEADER] = request_id

        if duration_ms > self.slow_request_ms:
            logger.warning(
                f"Slow API request: {method} {path} took {duration_ms:.2f}ms",
                extra={
                    "method": method,
                    "path": path,
                    "request_id": request_id,
                    "duration_ms": duration_ms,
                    "status_code": response.status_code,
                },
            )

        return response
