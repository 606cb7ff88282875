"""Authentication module delegating identity to the host platform."""

from compass.core.auth.backend import (
    PlatformAuthBackend,
    auth_backend,
    create_access_token,
    decode_token,
)
from compass.core.auth.dependencies import (
    AdminIdentity,
    TargetTenantId,
    get_admin_identity,
    get_auth_backend,
    get_identity,
    get_optional_identity,
    get_target_tenant_id,
)
from compass.core.auth.middleware import RequestIdMiddleware, TenantContextMiddleware
from compass.core.auth.schemas import Identity


__all__ = [
    # Dependencies
    "AdminIdentity",
    # Schemas
    "Identity",
    # Backend
    "PlatformAuthBackend",
    # Middleware
    "RequestIdMiddleware",
    "TargetTenantId",
    "TenantContextMiddleware",
    "auth_backend",
    "create_access_token",
    "decode_token",
    "get_admin_identity",
    "get_auth_backend",
    "get_identity",
    "get_optional_identity",
    "get_target_tenant_id",
]
