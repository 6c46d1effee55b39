"""Auth service client

Overview
--------
Thin async HTTP client for the external auth service. The API never verifies
tokens itself: every request's bearer token is resolved to a user by asking
the auth service, and account management (sign up, password sign in, sign
out) is forwarded unchanged.

API
---
- ``GET  /auth/v1/user``: resolve an access token to its user
- ``POST /auth/v1/signup``: create an account
- ``POST /auth/v1/token?grant_type=password``: password sign in
- ``POST /auth/v1/logout``: revoke the session of an access token

All requests carry the service key as the ``apikey`` header.

Errors
------
- A rejected token (401/403, or a payload without a user id) raises
  ``InvalidTokenError``.
- Any other non-2xx answer raises ``AuthServiceError`` with the upstream
  status code and body.
- Transport failures raise ``AuthServiceError`` without a status code, which
  the API reports as service unavailable.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from expressfix.core.errors import AuthServiceError, InvalidTokenError
from expressfix.core.logging_config import get_logger
from expressfix.core.models.io.auth import AuthUser
from expressfix.server.core.config import AuthServiceConfig, settings

logger = get_logger(__name__)


class AuthClient:
    """Async client of the external auth service."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Create an auth client.

        Args:
            base_url: Base URL of the auth service (e.g., ``http://localhost:54321``).
            api_key: Service key sent as the ``apikey`` header.
            timeout: Default HTTP timeout for the internal client.
            client: Optional preconfigured ``httpx.AsyncClient`` to use.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    @classmethod
    def from_config(cls, config: AuthServiceConfig) -> "AuthClient":
        return cls(config.url, api_key=config.api_key, timeout=config.timeout)

    def _headers(self, access_token: Optional[str] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        access_token: Optional[str] = None,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        try:
            r = await self._client.request(
                method,
                f"{self.base_url}{path}",
                headers=self._headers(access_token),
                params=params,
                json=json,
            )
        except httpx.RequestError as e:
            logger.warning(f"Auth service unreachable: {e}")
            raise AuthServiceError(f"Auth service unreachable: {e}") from e
        return r

    @staticmethod
    def _raise_for_status(r: httpx.Response, action: str) -> None:
        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise AuthServiceError(
                f"Auth service {action} failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e

    async def get_user(self, access_token: str) -> AuthUser:
        """Resolve an access token to its user.

        Raises:
            InvalidTokenError: When the auth service rejects the token.
            AuthServiceError: When the auth service fails or is unreachable.
        """
        r = await self._request("GET", "/auth/v1/user", access_token=access_token)
        if r.status_code in (401, 403):
            raise InvalidTokenError(status_code=r.status_code)
        self._raise_for_status(r, "get user")
        data = r.json()
        if not isinstance(data, dict) or not data.get("id"):
            raise InvalidTokenError(status_code=r.status_code)
        return AuthUser.model_validate(data)

    async def sign_up(self, email: str, password: str, full_name: Optional[str] = None) -> Dict[str, Any]:
        """Create an account; returns the upstream user or session payload."""
        body: Dict[str, Any] = {"email": email, "password": password, "data": {"full_name": full_name}}
        r = await self._request("POST", "/auth/v1/signup", json=body)
        self._raise_for_status(r, "sign up")
        return r.json()

    async def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """Password sign in; returns the upstream session payload."""
        r = await self._request(
            "POST",
            "/auth/v1/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        self._raise_for_status(r, "sign in")
        return r.json()

    async def sign_out(self, access_token: str) -> None:
        r = await self._request("POST", "/auth/v1/logout", access_token=access_token)
        self._raise_for_status(r, "sign out")

    async def aclose(self) -> None:
        await self._client.aclose()


_auth_client: Optional[AuthClient] = None


def get_auth_client() -> AuthClient:
    global _auth_client
    if _auth_client is None:
        _auth_client = AuthClient.from_config(settings.auth)
    return _auth_client


async def close_auth_client() -> None:
    global _auth_client
    if _auth_client is not None:
        await _auth_client.aclose()
        _auth_client = None
