"""Error types raised by the clients of external services.

Purpose:
- Provide typed exceptions thrown by `AuthClient` and `StorageClient`.
- Expose HTTP-oriented context (e.g., status code, error body) for diagnosis.

Usage:
- Catch `ExternalServiceError` for any upstream failure and inspect
  `status_code` or `details`.
- Catch `InvalidTokenError` when the auth service rejects a bearer token.
"""

from __future__ import annotations

from typing import Any, Optional


class ExternalServiceError(Exception):
    """Base error for failures talking to a third-party service.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code returned by the upstream service.
        details: Optional structured payload from the upstream service.
    """

    service: str = "external"

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthServiceError(ExternalServiceError):
    """Raised when the auth service fails or returns an unexpected payload."""

    service = "auth"


class InvalidTokenError(AuthServiceError):
    """Raised when the auth service does not accept a bearer token."""

    def __init__(self, status_code: Optional[int] = None) -> None:
        super().__init__("Unauthorized", status_code=status_code)


class StorageServiceError(ExternalServiceError):
    """Raised when object storage refuses or fails a request."""

    service = "storage"
