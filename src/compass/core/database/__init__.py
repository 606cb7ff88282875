"""Database layer - session management, base models, and mixins."""

from compass.core.database.base import Base, TenantMixin, TimestampMixin
from compass.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
    session_scope,
)


__all__ = [
    "Base",
    "TenantMixin",
    "TimestampMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
    "session_scope",
]
