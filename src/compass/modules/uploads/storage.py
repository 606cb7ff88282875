"""HTTP blob storage client.

Uploaded banners are stored in an external blob store that exposes a
small HTTP API: ``PUT {api_url}/{pathname}`` stores an object and
``POST {api_url}/delete`` removes objects by URL. Requests are
authenticated with a bearer read/write token.
"""

from typing import Any

import httpx
import structlog
from pydantic import BaseModel, ConfigDict

from compass.config import settings
from compass.core.errors import UpstreamError


logger = structlog.get_logger()


class StoredBlob(BaseModel):
    """Object metadata returned by the blob store."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    url: str
    pathname: str


class BlobStorage:
    """Async client for the blob storage HTTP API."""

    def __init__(
        self,
        api_url: str,
        token: str | None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            api_url: Base URL of the blob API
            token: Read/write token; None means storage is not configured
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.transport = transport

    @property
    def is_configured(self) -> bool:
        """Check if a token is available."""
        return bool(self.token)

    def _headers(self) -> dict[str, str]:
        if not self.token:
            raise UpstreamError(
                "Blob storage is not configured",
                error_code="storage_not_configured",
            )
        return {"Authorization": f"Bearer {self.token}"}

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def put(self, pathname: str, content: bytes, content_type: str) -> StoredBlob:
        """Store an object under ``pathname``.

        The store appends a random suffix, so the returned pathname may
        differ from the requested one.

        Raises:
            UpstreamError: If the store is unreachable or rejects the upload
        """
        headers = {
            **self._headers(),
            "x-content-type": content_type,
            "x-add-random-suffix": "1",
        }
        data = await self._request(
            "PUT",
            f"{self.api_url}/{pathname}",
            content=content,
            headers=headers,
        )
        return StoredBlob.model_validate(data)

    async def delete(self, url: str) -> None:
        """Delete a stored object by its public URL.

        Raises:
            UpstreamError: If the store is unreachable or rejects the request
        """
        await self._request(
            "POST",
            f"{self.api_url}/delete",
            json={"urls": [url]},
            headers=self._headers(),
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            async with self._client() as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                return response.json() if response.content else None
        except httpx.HTTPStatusError as e:
            logger.error(
                "blob_storage_rejected",
                method=method,
                status_code=e.response.status_code,
            )
            raise UpstreamError(
                "Blob storage rejected the request",
                error_code="storage_error",
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            logger.error("blob_storage_unreachable", method=method, error=str(e))
            raise UpstreamError(
                "Blob storage is unavailable",
                error_code="storage_unavailable",
            ) from e


def get_blob_storage() -> BlobStorage:
    """Build the blob storage client from settings (overridable in tests)."""
    return BlobStorage(
        api_url=settings.blob_api_url,
        token=settings.blob_read_write_token,
        timeout=settings.blob_timeout_seconds,
    )
