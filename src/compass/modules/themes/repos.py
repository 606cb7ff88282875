"""Theme repository for database operations."""

from datetime import UTC, datetime
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import delete, select

from compass.api.dependencies import DBSession
from compass.modules.themes.models import Theme


class ThemeRepository:
    """Repository for Theme database operations.

    ``tenant_id`` is the natural key: there is at most one theme per
    tenant, enforced by a unique constraint.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def get_by_tenant(self, tenant_id: str) -> Theme | None:
        """Get a tenant's saved theme.

        Returns:
            Theme if the tenant saved one, None otherwise
        """
        stmt = (
            select(Theme)
            .where(Theme.tenant_id == tenant_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, tenant_id: str, fields: dict[str, Any]) -> tuple[Theme, bool]:
        """Save a tenant's theme, updating in place when one exists.

        ``created_at`` is preserved on update.

        Args:
            tenant_id: The tenant's id
            fields: Column values for the theme

        Returns:
            Tuple of (theme, created) where created is False on update
        """
        theme = await self.get_by_tenant(tenant_id)
        created = theme is None

        if theme is None:
            theme = Theme(tenant_id=tenant_id, **fields)
            self.session.add(theme)
        else:
            for field, value in fields.items():
                setattr(theme, field, value)
            theme.updated_at = datetime.now(UTC)

        await self.session.flush()
        await self.session.refresh(theme)
        return theme, created

    async def delete_by_tenant(self, tenant_id: str) -> bool:
        """Delete a tenant's theme.

        Returns:
            True if a theme was removed, False if there was none
        """
        stmt = delete(Theme).where(Theme.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0


# Type alias for dependency injection
ThemeRepo = Annotated[ThemeRepository, Depends(ThemeRepository)]
