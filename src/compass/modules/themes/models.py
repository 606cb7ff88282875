"""Company theme database models."""

from typing import Any

from sqlalchemy import JSON, Integer, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from compass.core.constants import MAX_THEME_NAME_LENGTH
from compass.core.database.base import Base, TenantMixin, TimestampMixin


# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONColumn = JSON().with_variant(JSONB(), "postgresql")


class Theme(Base, TimestampMixin, TenantMixin):
    """A tenant's saved visual theme.

    At most one row exists per tenant. A missing row means the tenant
    uses the default theme.

    Attributes:
        id: Database-assigned integer id
        name: Display name chosen by the admin
        colors: Semantic role to color value
        typography: Font family, size, weight and line-height tokens
        border_radius: Radius token to CSS length
        spacing: Spacing tokens (``{"scale": 1}``)
        mode: ``light``, ``dark`` or ``auto``
        custom_css: Extra CSS appended after the generated variables
    """

    __tablename__ = "company_themes"
    __table_args__ = (UniqueConstraint("tenant_id", name="uq_company_themes_tenant_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(MAX_THEME_NAME_LENGTH), nullable=True)
    colors: Mapped[dict[str, Any]] = mapped_column(JSONColumn, nullable=False)
    typography: Mapped[dict[str, Any]] = mapped_column(JSONColumn, nullable=False)
    border_radius: Mapped[dict[str, Any]] = mapped_column(JSONColumn, nullable=False)
    spacing: Mapped[dict[str, Any]] = mapped_column(JSONColumn, nullable=False)
    mode: Mapped[str] = mapped_column(String(8), nullable=False, default="dark")
    custom_css: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Theme(id={self.id}, tenant_id={self.tenant_id}, name={self.name})>"
