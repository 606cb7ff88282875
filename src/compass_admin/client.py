"""Async HTTP client for the Compass API."""

from typing import Any

import httpx

from compass_admin.config import AdminSettings, get_admin_settings


class CompassAPIError(Exception):
    """Raised when the API answers with an error envelope or is unreachable.

    Attributes:
        message: Human-readable error message from the envelope
        code: Machine-readable error code
        status_code: HTTP status, or None when no response was received
    """

    def __init__(self, message: str, code: str = "request_failed", status_code: int | None = None) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class CompassClient:
    """Thin async wrapper over the Compass REST API.

    Use as an async context manager so the underlying connection pool is
    closed::

        async with CompassClient(api_url, token) as client:
            cards = await client.list_cards()
    """

    def __init__(
        self,
        api_url: str,
        token: str | None = None,
        tenant_id: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.tenant_id = tenant_id
        self._http = httpx.AsyncClient(
            base_url=api_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: AdminSettings | None = None) -> "CompassClient":
        settings = settings or get_admin_settings()
        return cls(
            api_url=settings.api_url,
            token=settings.token,
            tenant_id=settings.tenant_id,
            timeout=settings.timeout_seconds,
        )

    async def __aenter__(self) -> "CompassClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _tenant_params(self) -> dict[str, str]:
        return {"tenant_id": self.tenant_id} if self.tenant_id else {}

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise CompassAPIError(f"Could not reach Compass API: {e}") from e

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            raise CompassAPIError(
                body.get("error") or response.reason_phrase or "Request failed",
                code=body.get("code", "request_failed"),
                status_code=response.status_code,
            )
        return response.json()

    # ============================================================
    # Cards
    # ============================================================

    async def list_cards(self) -> list[dict[str, Any]]:
        data = await self._request("GET", "/cards", params=self._tenant_params())
        return data["cards"]

    async def get_card(self, card_id: int) -> dict[str, Any]:
        data = await self._request("GET", f"/cards/{card_id}", params=self._tenant_params())
        return data["card"]

    async def create_card(self, payload: dict[str, Any]) -> dict[str, Any]:
        data = await self._request("POST", "/cards", json=payload)
        return data["card"]

    async def update_card(self, card_id: int, changes: dict[str, Any]) -> dict[str, Any]:
        data = await self._request("PATCH", f"/cards/{card_id}", json=changes)
        return data["card"]

    async def delete_card(self, card_id: int) -> None:
        await self._request("DELETE", f"/cards/{card_id}")

    async def reorder_cards(self, card_ids: list[int]) -> None:
        await self._request("POST", "/cards/reorder", json={"cardIds": card_ids})

    # ============================================================
    # Themes
    # ============================================================

    async def get_theme(self) -> tuple[dict[str, Any], bool]:
        data = await self._request("GET", "/themes", params=self._tenant_params())
        return data["theme"], data["isDefault"]

    async def list_presets(self) -> list[dict[str, Any]]:
        data = await self._request("GET", "/themes/presets")
        return data["presets"]

    async def save_theme(self, theme: dict[str, Any]) -> dict[str, Any]:
        payload: dict[str, Any] = {"theme": theme}
        if self.tenant_id:
            payload["tenantId"] = self.tenant_id
        data = await self._request("POST", "/themes", json=payload)
        return data["theme"]

    async def reset_theme(self) -> None:
        await self._request("DELETE", "/themes", params=self._tenant_params())


def get_client() -> CompassClient:
    """Build a client from the environment (patched in tests)."""
    return CompassClient.from_settings()
