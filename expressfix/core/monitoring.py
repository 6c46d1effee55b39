"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for tracing the
ExpressFix API, including:
- API endpoint tracing
- Database operation monitoring
- Outbound HTTP calls to the auth and storage services
- Design review events (analysis completed, export created)

All helpers degrade to debug logging when Logfire is disabled, so callers never
need to check whether monitoring is configured.
"""

from typing import Any, Optional

import logfire
from fastapi import FastAPI

from expressfix.core.logging_config import get_logger
from expressfix.server.core.config import LogfireConfig, settings

logger = get_logger(__name__)

_logfire_ready = False


def initialize_logfire(app: FastAPI | None = None, config: LogfireConfig | None = None) -> bool:
    """
    Initialize Logfire for monitoring and tracing.

    Sets up Logfire with automatic instrumentation for SQLAlchemy, HTTPX and,
    when an application is given, FastAPI.

    Args:
        app: FastAPI application instance for endpoint instrumentation (optional).
        config: Logfire settings; defaults to the global application settings.

    Returns:
        True if Logfire is active after the call.
    """
    global _logfire_ready

    cfg = config or settings.logfire
    if not cfg.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not cfg.token:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=cfg.token,
            service_name=cfg.service_name,
            environment=cfg.environment,
        )
        logfire.instrument_sqlalchemy()
        logfire.instrument_httpx()
        if app is not None:
            logfire.instrument_fastapi(app=app)
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    _logfire_ready = True
    logger.info(f"Logfire monitoring initialized: environment={cfg.environment}, service={cfg.service_name}")
    return True


def is_logfire_ready() -> bool:
    """Whether Logfire has been configured for this process."""
    return _logfire_ready


def _emit(message: str, **attributes: Any) -> None:
    if not _logfire_ready:
        logger.debug(f"{message}: {attributes}")
        return
    logfire.info(message, **attributes)


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    _emit("API request completed", method=method, path=path, status_code=status_code, duration_ms=duration_ms)


def log_analysis_completed(analysis_id: str, upload_id: str, analysis_type: str, overall_score: int) -> None:
    """
    Log a persisted design analysis.

    Args:
        analysis_id: Identifier of the stored analysis result
        upload_id: Identifier of the analysed upload
        analysis_type: Which review tool produced the result
        overall_score: Score reported to the user
    """
    _emit(
        "Design analysis completed",
        analysis_id=analysis_id,
        upload_id=upload_id,
        analysis_type=analysis_type,
        overall_score=overall_score,
    )


def log_export_created(export_id: str, export_format: str, export_quality: str) -> None:
    """Log a recorded export."""
    _emit("Design export created", export_id=export_id, export_format=export_format, export_quality=export_quality)


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    if not _logfire_ready:
        logger.debug(f"{error_type}: {error_message} {context or {}}")
        return
    logfire.error(f"{error_type}: {error_message}", **(context or {}))
