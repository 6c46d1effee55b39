"""Unit tests for the Logfire monitoring helpers."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI

from expressfix.core import monitoring
from expressfix.server.core.config import LogfireConfig


@pytest.fixture(autouse=True)
def reset_ready(monkeypatch):
    monkeypatch.setattr(monitoring, "_logfire_ready", False)


@pytest.fixture
def mock_logfire():
    with patch.object(monitoring, "logfire") as mock:
        yield mock


class TestInitializeLogfire:
    def test_disabled(self, mock_logfire):
        assert monitoring.initialize_logfire(config=LogfireConfig(enabled=False)) is False
        mock_logfire.configure.assert_not_called()
        assert monitoring.is_logfire_ready() is False

    def test_enabled_without_token(self, mock_logfire):
        with patch.object(monitoring, "logger") as mock_logger:
            assert monitoring.initialize_logfire(config=LogfireConfig(enabled=True)) is False
        mock_logger.warning.assert_called_once()
        mock_logfire.configure.assert_not_called()

    def test_enabled_configures_and_instruments(self, mock_logfire):
        app = FastAPI()
        config = LogfireConfig(enabled=True, token="tok", service_name="svc", environment="test")

        assert monitoring.initialize_logfire(app, config) is True

        mock_logfire.configure.assert_called_once_with(token="tok", service_name="svc", environment="test")
        mock_logfire.instrument_sqlalchemy.assert_called_once()
        mock_logfire.instrument_httpx.assert_called_once()
        mock_logfire.instrument_fastapi.assert_called_once_with(app=app)
        assert monitoring.is_logfire_ready() is True

    def test_without_app_skips_fastapi(self, mock_logfire):
        monitoring.initialize_logfire(config=LogfireConfig(enabled=True, token="tok"))
        mock_logfire.instrument_fastapi.assert_not_called()

    def test_configure_failure_is_logged(self, mock_logfire):
        mock_logfire.configure.side_effect = RuntimeError("bad token")
        with patch.object(monitoring, "logger") as mock_logger:
            assert monitoring.initialize_logfire(config=LogfireConfig(enabled=True, token="tok")) is False
        mock_logger.error.assert_called_once()
        assert monitoring.is_logfire_ready() is False

    def test_defaults_to_global_settings(self, mock_logfire):
        with patch.object(monitoring, "settings") as mock_settings:
            mock_settings.logfire = LogfireConfig(enabled=False)
            assert monitoring.initialize_logfire() is False


class TestEventHelpers:
    def test_helpers_log_debug_when_not_ready(self, mock_logfire):
        with patch.object(monitoring, "logger") as mock_logger:
            monitoring.log_api_request("GET", "/health", 200, 1.5)
            monitoring.log_error("ValueError", "boom", {"path": "/x"})

        assert mock_logger.debug.call_count == 2
        mock_logfire.info.assert_not_called()
        mock_logfire.error.assert_not_called()

    def test_api_request_when_ready(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "_logfire_ready", True)
        monitoring.log_api_request("POST", "/api/v1/uploads", 201, 12.0)
        mock_logfire.info.assert_called_once_with(
            "API request completed", method="POST", path="/api/v1/uploads", status_code=201, duration_ms=12.0
        )

    def test_analysis_and_export_events(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "_logfire_ready", True)
        monitoring.log_analysis_completed("a1", "u1", "smart_fix", 88)
        monitoring.log_export_created("e1", "PNG", "high")

        first, second = mock_logfire.info.call_args_list
        assert first.args[0] == "Design analysis completed"
        assert first.kwargs["overall_score"] == 88
        assert second.args[0] == "Design export created"
        assert second.kwargs == {"export_id": "e1", "export_format": "PNG", "export_quality": "high"}

    def test_error_when_ready(self, mock_logfire, monkeypatch):
        monkeypatch.setattr(monitoring, "_logfire_ready", True)
        monitoring.log_error("RuntimeError", "boom", {"error_id": "abc"})
        mock_logfire.error.assert_called_once_with("RuntimeError: boom", error_id="abc")
