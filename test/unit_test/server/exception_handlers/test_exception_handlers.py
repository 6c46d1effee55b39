"""
Unit tests for server exception handlers.

The global handler is called directly with a mocked request; the upstream
service handler is also exercised through a small app.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from expressfix.core.errors import AuthServiceError, InvalidTokenError, StorageServiceError
from expressfix.server.exception_handlers import setup_exception_handlers
from expressfix.server.exception_handlers.global_handler import (
    external_service_exception_handler,
    global_exception_handler,
)

HANDLER_MODULE = "expressfix.server.exception_handlers.global_handler"


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "POST"
    request.url.path = "/api/v1/uploads"
    request.query_params = {"upload_type": "design"}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


class TestGlobalExceptionHandler:
    @pytest.mark.asyncio
    async def test_logs_error_with_context(self, mock_request):
        with patch(f"{HANDLER_MODULE}.logger") as mock_logger, patch(f"{HANDLER_MODULE}.log_error"):
            await global_exception_handler(mock_request, ValueError("boom"))

        mock_logger.error.assert_called_once()
        message = mock_logger.error.call_args[0][0]
        extra = mock_logger.error.call_args[1]["extra"]
        assert "Unhandled exception" in message
        assert extra["error_type"] == "ValueError"
        assert extra["method"] == "POST"
        assert extra["path"] == "/api/v1/uploads"
        assert extra["query_params"] == {"upload_type": "design"}
        assert extra["client"] == "127.0.0.1"

    @pytest.mark.asyncio
    async def test_returns_generic_500(self, mock_request):
        with patch(f"{HANDLER_MODULE}.logger"), patch(f"{HANDLER_MODULE}.log_error"):
            response = await global_exception_handler(mock_request, RuntimeError("secret detail"))

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        body = json.loads(response.body.decode())
        assert body["detail"] == "Internal server error"
        assert body["error_type"] == "RuntimeError"
        assert "secret detail" not in response.body.decode()

    @pytest.mark.asyncio
    async def test_error_id_matches_log(self, mock_request):
        with patch(f"{HANDLER_MODULE}.logger") as mock_logger, patch(f"{HANDLER_MODULE}.log_error") as mock_log_error:
            response = await global_exception_handler(mock_request, RuntimeError("x"))

        error_id = json.loads(response.body.decode())["error_id"]
        assert len(error_id) == 32
        assert mock_logger.error.call_args[1]["extra"]["error_id"] == error_id
        assert error_id in mock_logger.error.call_args[0][0]
        assert mock_log_error.call_args[0][2]["error_id"] == error_id

    @pytest.mark.asyncio
    async def test_error_ids_are_unique(self, mock_request):
        with patch(f"{HANDLER_MODULE}.logger"), patch(f"{HANDLER_MODULE}.log_error"):
            first = await global_exception_handler(mock_request, RuntimeError("x"))
            second = await global_exception_handler(mock_request, RuntimeError("x"))

        assert json.loads(first.body)["error_id"] != json.loads(second.body)["error_id"]

    @pytest.mark.asyncio
    async def test_missing_client(self, mock_request):
        mock_request.client = None
        with patch(f"{HANDLER_MODULE}.logger") as mock_logger, patch(f"{HANDLER_MODULE}.log_error"):
            await global_exception_handler(mock_request, RuntimeError("x"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestExternalServiceExceptionHandler:
    @pytest.mark.asyncio
    async def test_unreachable_service_is_503(self, mock_request):
        with patch(f"{HANDLER_MODULE}.logger"), patch(f"{HANDLER_MODULE}.log_error"):
            response = await external_service_exception_handler(mock_request, StorageServiceError("connect failed"))

        assert response.status_code == 503
        assert json.loads(response.body) == {
            "detail": "Storage service unavailable",
            "service": "storage",
            "upstream_status": None,
        }

    @pytest.mark.asyncio
    async def test_upstream_error_is_502(self, mock_request):
        with patch(f"{HANDLER_MODULE}.logger") as mock_logger, patch(f"{HANDLER_MODULE}.log_error"):
            response = await external_service_exception_handler(
                mock_request, AuthServiceError("bad gateway", status_code=500)
            )

        assert response.status_code == 502
        body = json.loads(response.body)
        assert body["service"] == "auth"
        assert body["upstream_status"] == 500
        assert mock_logger.error.call_args[1]["extra"]["service"] == "auth"


class TestSetupExceptionHandlers:
    def test_registers_both_handlers(self):
        app = FastAPI()
        setup_exception_handlers(app)

        from expressfix.core.errors import ExternalServiceError

        assert app.exception_handlers[Exception] is global_exception_handler
        assert app.exception_handlers[ExternalServiceError] is external_service_exception_handler

    @pytest.mark.asyncio
    async def test_service_errors_are_mapped_in_app(self):
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/storage")
        async def storage_route():
            raise StorageServiceError("refused", status_code=403)

        @app.get("/token")
        async def token_route():
            raise InvalidTokenError(401)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            storage = await client.get("/storage")
            token = await client.get("/token")

        assert storage.status_code == 502
        assert storage.json()["upstream_status"] == 403
        assert token.status_code == 502
        assert token.json()["service"] == "auth"
