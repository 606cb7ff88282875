"""Integration tests for the theme repository."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from compass.modules.themes.presets import PROFESSIONAL, get_default_theme
from compass.modules.themes.repos import ThemeRepository
from tests.factories.identity import OTHER_TENANT_ID, TENANT_ID


def theme_fields(preset=None) -> dict:
    """Column values for a preset, the way the service stores them."""
    return (preset or get_default_theme()).model_dump(mode="json", exclude={"id"})


class TestThemeRepository:
    """Tests for ThemeRepository."""

    @pytest.mark.asyncio
    async def test_missing_theme(self, db: AsyncSession):
        assert await ThemeRepository(db).get_by_tenant(TENANT_ID) is None

    @pytest.mark.asyncio
    async def test_upsert_creates_then_updates(self, db: AsyncSession):
        repo = ThemeRepository(db)

        theme, created = await repo.upsert(TENANT_ID, theme_fields())
        assert created is True
        first_id = theme.id
        created_at = theme.created_at

        theme, created = await repo.upsert(TENANT_ID, theme_fields(PROFESSIONAL))

        assert created is False
        assert theme.id == first_id
        assert theme.created_at == created_at
        assert theme.name == PROFESSIONAL.name
        assert theme.colors["primary"] == PROFESSIONAL.colors.primary

    @pytest.mark.asyncio
    async def test_themes_are_per_tenant(self, db: AsyncSession):
        repo = ThemeRepository(db)
        await repo.upsert(TENANT_ID, theme_fields(PROFESSIONAL))

        assert await repo.get_by_tenant(OTHER_TENANT_ID) is None

    @pytest.mark.asyncio
    async def test_delete_by_tenant(self, db: AsyncSession):
        repo = ThemeRepository(db)
        await repo.upsert(TENANT_ID, theme_fields())

        assert await repo.delete_by_tenant(TENANT_ID) is True
        assert await repo.delete_by_tenant(TENANT_ID) is False
        assert await repo.get_by_tenant(TENANT_ID) is None
