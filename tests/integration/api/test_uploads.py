"""End-to-end tests for the upload API."""

import httpx
import pytest
from httpx import AsyncClient
from starlette.datastructures import UploadFile

from compass.config import settings
from compass.modules.uploads.storage import BlobStorage, get_blob_storage
from tests.factories.identity import OTHER_TENANT_ID, TENANT_ID, make_auth_headers


BLOB_URL = "https://blob.example.com"


@pytest.fixture
def blob_requests(app) -> list[httpx.Request]:
    """Route blob storage calls to an in-memory mock and record them."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path == "/delete":
            return httpx.Response(200, json={})
        if "broken" in request.url.path:
            return httpx.Response(503, json={"error": "unavailable"})
        pathname = request.url.path.lstrip("/")
        return httpx.Response(
            200, json={"url": f"{BLOB_URL}/{pathname}", "pathname": pathname}
        )

    storage = BlobStorage(BLOB_URL, "rw-token", transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_blob_storage] = lambda: storage
    return requests


class TestUploadApi:
    """Tests for POST/DELETE /uploads."""

    @pytest.mark.asyncio
    async def test_upload_image(self, admin_client: AsyncClient, blob_requests):
        response = await admin_client.post(
            "/api/v1/uploads",
            files={"file": ("Hero Image.PNG", b"\x89PNG-data", "image/png")},
        )

        assert response.status_code == 200, response.text
        body = response.json()
        assert body["pathname"].startswith(f"compass-banners/{TENANT_ID}/")
        assert body["pathname"].endswith("-hero_image.png")
        assert body["url"] == f"{BLOB_URL}/{body['pathname']}"
        assert body["size"] == len(b"\x89PNG-data")
        assert body["mimeType"] == "image/png"
        assert len(blob_requests) == 1

    @pytest.mark.asyncio
    async def test_rejects_bad_type_without_storage_call(
        self, admin_client: AsyncClient, blob_requests
    ):
        response = await admin_client.post(
            "/api/v1/uploads",
            files={"file": ("notes.pdf", b"%PDF", "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_file_type"
        assert blob_requests == []

    @pytest.mark.asyncio
    async def test_missing_file(self, admin_client: AsyncClient, blob_requests):
        response = await admin_client.post("/api/v1/uploads")

        assert response.status_code == 400
        assert blob_requests == []

    @pytest.mark.asyncio
    async def test_storage_failure_is_500(self, admin_client: AsyncClient, blob_requests):
        response = await admin_client.post(
            "/api/v1/uploads",
            files={"file": ("broken.png", b"png", "image/png")},
        )

        assert response.status_code == 500
        assert response.json()["code"] == "storage_error"

    @pytest.mark.asyncio
    async def test_member_cannot_upload(self, client: AsyncClient, member_headers, blob_requests):
        response = await client.post(
            "/api/v1/uploads",
            files={"file": ("a.png", b"png", "image/png")},
            headers=member_headers,
        )

        assert response.status_code == 401
        assert blob_requests == []

    @pytest.mark.asyncio
    async def test_delete_upload(self, admin_client: AsyncClient, blob_requests):
        response = await admin_client.delete(
            "/api/v1/uploads",
            params={"url": f"{BLOB_URL}/compass-banners/{TENANT_ID}/1-a.png"},
        )

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert blob_requests[0].url.path == "/delete"

    @pytest.mark.asyncio
    async def test_cannot_delete_other_tenants_upload(
        self, client: AsyncClient, admin_client: AsyncClient, blob_requests
    ):
        uploaded = await admin_client.post(
            "/api/v1/uploads",
            files={"file": ("a.png", b"png", "image/png")},
        )
        url = uploaded.json()["url"]

        response = await client.delete(
            "/api/v1/uploads",
            params={"url": url},
            headers=make_auth_headers(tenant_id=OTHER_TENANT_ID),
        )

        assert response.status_code == 401
        assert response.json()["code"] == "tenant_mismatch"
        assert [r.url.path for r in blob_requests if r.url.path == "/delete"] == []

    @pytest.mark.asyncio
    async def test_oversize_upload_rejected_before_read(
        self,
        admin_client: AsyncClient,
        blob_requests,
        monkeypatch: pytest.MonkeyPatch,
    ):
        async def fail_read(self, size: int = -1) -> bytes:
            raise AssertionError("body should not be read")

        monkeypatch.setattr(settings, "upload_max_image_bytes", 4)
        monkeypatch.setattr(UploadFile, "read", fail_read)

        response = await admin_client.post(
            "/api/v1/uploads",
            files={"file": ("big.png", b"0123456789", "image/png")},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "file_too_large"
        assert blob_requests == []
