"""SQLAlchemy declarative base and common mixins."""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from compass.core.constants import MAX_TENANT_ID_LENGTH


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class TenantMixin:
    """Mixin that adds tenant_id for multi-tenancy support.

    Tenants are companies on the host platform, identified by the
    platform's opaque string ids (``biz_...``). There is no local
    tenants table, so the column carries no foreign key.

    Every query against a tenant-scoped model must filter on this column.
    """

    tenant_id: Mapped[str] = mapped_column(
        String(MAX_TENANT_ID_LENGTH),
        index=True,
        nullable=False,
    )
