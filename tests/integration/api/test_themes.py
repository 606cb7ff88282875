"""End-to-end tests for the theme API."""

import pytest
from httpx import AsyncClient

from compass.modules.themes.presets import get_default_theme, get_preset
from tests.factories.identity import OTHER_TENANT_ID, TENANT_ID


def preset_payload(preset_id: str, **overrides) -> dict:
    preset = get_preset(preset_id)
    assert preset is not None
    theme = preset.model_dump(mode="json", by_alias=True, exclude={"id"})
    theme.update(overrides)
    return theme


class TestThemeCycle:
    """get -> save -> get -> reset -> get."""

    @pytest.mark.asyncio
    async def test_default_saved_default(self, admin_client: AsyncClient):
        response = await admin_client.get("/api/v1/themes")
        assert response.status_code == 200
        body = response.json()
        assert body["isDefault"] is True
        assert body["theme"]["id"] == get_default_theme().id
        assert body["theme"]["tenantId"] == TENANT_ID

        response = await admin_client.post(
            "/api/v1/themes",
            json={"tenantId": TENANT_ID, "theme": preset_payload("minimal", name="Ours")},
        )
        assert response.status_code == 201
        assert response.json()["message"] == "Theme created successfully"

        response = await admin_client.get("/api/v1/themes")
        body = response.json()
        assert body["isDefault"] is False
        assert body["theme"]["name"] == "Ours"
        assert body["theme"]["colors"]["primaryHover"] == "#1a1a1a"
        assert body["theme"]["borderRadius"]["2xl"] == "1.5rem"

        response = await admin_client.delete("/api/v1/themes")
        assert response.status_code == 200
        assert response.json()["message"] == "Theme reset to default successfully"

        response = await admin_client.get("/api/v1/themes")
        assert response.json()["isDefault"] is True

    @pytest.mark.asyncio
    async def test_second_save_updates_in_place(self, admin_client: AsyncClient):
        first = await admin_client.post(
            "/api/v1/themes", json={"theme": preset_payload("professional")}
        )
        second = await admin_client.post(
            "/api/v1/themes",
            json={"theme": preset_payload("professional", customCSS=".x { color: red; }")},
        )

        assert first.status_code == 201
        assert second.status_code == 200
        assert second.json()["message"] == "Theme updated successfully"
        assert first.json()["theme"]["id"] == second.json()["theme"]["id"]
        assert first.json()["theme"]["createdAt"] == second.json()["theme"]["createdAt"]
        assert second.json()["theme"]["customCSS"] == ".x { color: red; }"

    @pytest.mark.asyncio
    async def test_reset_is_idempotent(self, admin_client: AsyncClient):
        assert (await admin_client.delete("/api/v1/themes")).status_code == 200
        assert (await admin_client.delete("/api/v1/themes")).status_code == 200


class TestThemeAccess:
    """Theme writes are admin-only and limited to the admin's tenant."""

    @pytest.mark.asyncio
    async def test_tenant_mismatch_rejected(self, admin_client: AsyncClient):
        response = await admin_client.post(
            "/api/v1/themes",
            json={"tenantId": OTHER_TENANT_ID, "theme": preset_payload("minimal")},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "tenant_mismatch"

    @pytest.mark.asyncio
    async def test_reset_other_tenant_rejected(self, admin_client: AsyncClient):
        response = await admin_client.delete(
            "/api/v1/themes", params={"tenant_id": OTHER_TENANT_ID}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_member_cannot_save(self, client: AsyncClient, member_headers):
        response = await client.post(
            "/api/v1/themes",
            json={"theme": preset_payload("minimal")},
            headers=member_headers,
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_mode(self, admin_client: AsyncClient):
        response = await admin_client.post(
            "/api/v1/themes", json={"theme": preset_payload("minimal", mode="sepia")}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_public_read_by_query(self, client: AsyncClient):
        response = await client.get("/api/v1/themes", params={"tenant_id": "biz_new"})

        assert response.status_code == 200
        assert response.json()["isDefault"] is True


class TestPresetsAndCss:
    """Tests for the preset catalogue and stylesheet endpoints."""

    @pytest.mark.asyncio
    async def test_list_presets(self, client: AsyncClient):
        response = await client.get("/api/v1/themes/presets")

        assert response.status_code == 200
        ids = [p["id"] for p in response.json()["presets"]]
        assert ids == ["default-dark", "default-light", "minimal", "professional"]

    @pytest.mark.asyncio
    async def test_css_for_default(self, client: AsyncClient):
        response = await client.get("/api/v1/themes/css", params={"tenant_id": "biz_new"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")
        assert "--background: #141212;" in response.text

    @pytest.mark.asyncio
    async def test_css_follows_saved_theme(self, admin_client: AsyncClient):
        await admin_client.post(
            "/api/v1/themes",
            json={"theme": preset_payload("minimal", customCSS="body { margin: 0; }")},
        )

        response = await admin_client.get("/api/v1/themes/css")

        assert "--background: #ffffff;" in response.text
        assert response.text.rstrip().endswith("body { margin: 0; }")
