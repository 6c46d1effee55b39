"""Object storage client

Thin async HTTP client for the object storage REST API. Design files never
pass through this service: the API asks storage for a signed upload URL and
the browser uploads the bytes directly.

API
---
- ``POST /storage/v1/object/upload/sign/{bucket}/{path}`` returns ``{"url": ...}``,
  a signed URL relative to ``/storage/v1``.
- Public objects are served at ``/storage/v1/object/public/{bucket}/{path}``.
"""

from __future__ import annotations

from typing import Dict, Optional

import httpx

from expressfix.core.errors import StorageServiceError
from expressfix.core.logging_config import get_logger
from expressfix.server.core.config import StorageConfig, settings

logger = get_logger(__name__)


class StorageClient:
    """Async client of the object storage service."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    @classmethod
    def from_config(cls, config: StorageConfig) -> "StorageClient":
        return cls(config.url, api_key=config.api_key, timeout=config.timeout)

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def create_signed_upload_url(self, bucket: str, path: str) -> str:
        """Ask storage for a URL the client can upload one object to.

        Args:
            bucket: Target bucket
            path: Object path inside the bucket

        Returns:
            Absolute signed upload URL

        Raises:
            StorageServiceError: When storage refuses the request or is unreachable.
        """
        try:
            r = await self._client.post(
                f"{self.base_url}/storage/v1/object/upload/sign/{bucket}/{path}",
                headers=self._headers(),
            )
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise StorageServiceError(
                f"Signing upload URL failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=e.response.text,
            ) from e
        except httpx.RequestError as e:
            logger.warning(f"Storage service unreachable: {e}")
            raise StorageServiceError(f"Storage service unreachable: {e}") from e

        signed = r.json().get("url")
        if not signed:
            raise StorageServiceError("Storage returned no signed URL", status_code=r.status_code, details=r.text)
        if signed.startswith("http://") or signed.startswith("https://"):
            return signed
        return f"{self.base_url}/storage/v1{signed}"

    def public_url(self, bucket: str, path: str) -> str:
        """Public URL of an object; no request is made."""
        return f"{self.base_url}/storage/v1/object/public/{bucket}/{path}"

    async def aclose(self) -> None:
        await self._client.aclose()


_storage_client: Optional[StorageClient] = None


def get_storage_client() -> StorageClient:
    global _storage_client
    if _storage_client is None:
        _storage_client = StorageClient.from_config(settings.storage)
    return _storage_client


async def close_storage_client() -> None:
    global _storage_client
    if _storage_client is not None:
        await _storage_client.aclose()
        _storage_client = None
