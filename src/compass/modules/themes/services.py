"""Theme service for business logic."""

from typing import Annotated

import structlog
from fastapi import Depends

from compass.core.constants import DEFAULT_THEME_NAME
from compass.modules.themes.css import render_theme_css
from compass.modules.themes.models import Theme
from compass.modules.themes.presets import PRESETS, get_default_theme
from compass.modules.themes.repos import ThemeRepo
from compass.modules.themes.schemas import ThemeConfig, ThemePreset, ThemeResponse


logger = structlog.get_logger()


def theme_to_response(theme: Theme) -> ThemeResponse:
    """Build the API representation of a saved theme."""
    return ThemeResponse(
        id=str(theme.id),
        tenant_id=theme.tenant_id,
        name=theme.name or DEFAULT_THEME_NAME,
        colors=theme.colors,
        typography=theme.typography,
        spacing=theme.spacing,
        border_radius=theme.border_radius,
        mode=theme.mode,
        custom_css=theme.custom_css,
        created_at=theme.created_at,
        updated_at=theme.updated_at,
    )


def default_theme_response(tenant_id: str) -> ThemeResponse:
    """Build the default theme as seen by a tenant without a saved one."""
    default = get_default_theme()
    return ThemeResponse(tenant_id=tenant_id, **default.model_dump())


class ThemeService:
    """Service for per-tenant theme management."""

    def __init__(self, repo: ThemeRepo) -> None:
        self.repo = repo

    async def get_theme(self, tenant_id: str) -> tuple[ThemeResponse, bool]:
        """Get a tenant's theme, falling back to the default.

        Returns:
            Tuple of (theme, is_default)
        """
        theme = await self.repo.get_by_tenant(tenant_id)
        if theme is None:
            return default_theme_response(tenant_id), True
        return theme_to_response(theme), False

    async def save_theme(self, tenant_id: str, config: ThemeConfig) -> tuple[ThemeResponse, bool]:
        """Create or replace a tenant's theme.

        Returns:
            Tuple of (theme, created)
        """
        fields = config.model_dump(mode="json", by_alias=False)
        fields["custom_css"] = config.custom_css or None
        theme, created = await self.repo.upsert(tenant_id, fields)
        logger.info(
            "theme_saved",
            tenant_id=tenant_id,
            theme_id=theme.id,
            created=created,
        )
        return theme_to_response(theme), created

    async def reset_theme(self, tenant_id: str) -> bool:
        """Reset a tenant to the default theme. Safe to repeat.

        Returns:
            True if a saved theme was removed
        """
        removed = await self.repo.delete_by_tenant(tenant_id)
        logger.info("theme_reset", tenant_id=tenant_id, removed=removed)
        return removed

    async def render_css(self, tenant_id: str) -> str:
        """Render a tenant's effective theme as CSS."""
        theme, _ = await self.get_theme(tenant_id)
        return render_theme_css(theme)

    def list_presets(self) -> list[ThemePreset]:
        """List the built-in theme presets."""
        return list(PRESETS.values())


# Type alias for dependency injection
ThemeSvc = Annotated[ThemeService, Depends(ThemeService)]
