"""FastAPI dependencies for authentication.

This module provides FastAPI dependency injection functions for:
- Resolving the caller identity from the bearer token
- Requiring tenant-admin capability for write endpoints
- Resolving which tenant a read request targets
"""

from typing import Annotated

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from compass.core.auth.backend import PlatformAuthBackend, auth_backend
from compass.core.auth.schemas import Identity
from compass.core.errors import UnauthorizedError, ValidationError


# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_backend() -> PlatformAuthBackend:
    """Return the auth collaborator (overridable in tests)."""
    return auth_backend


async def get_optional_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    backend: Annotated[PlatformAuthBackend, Depends(get_auth_backend)],
) -> Identity | None:
    """Get the caller identity if a valid token was sent, None otherwise.

    Used by read endpoints that end users reach without an admin session.
    """
    if not credentials:
        return None
    return backend.authenticate(credentials.credentials)


async def get_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    backend: Annotated[PlatformAuthBackend, Depends(get_auth_backend)],
) -> Identity:
    """Get the authenticated caller.

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    if not credentials:
        raise UnauthorizedError(
            "Missing authentication token",
            error_code="missing_token",
        )

    identity = backend.authenticate(credentials.credentials)
    if identity is None:
        raise UnauthorizedError(
            "Invalid or expired token",
            error_code="invalid_token",
        )

    return identity


async def get_admin_identity(
    identity: Annotated[Identity, Depends(get_identity)],
) -> Identity:
    """Get the authenticated caller, ensuring they administer their tenant.

    Raises:
        UnauthorizedError: If the caller is not a tenant admin
    """
    if not identity.is_admin:
        raise UnauthorizedError(
            "Admin access required",
            error_code="not_admin",
        )
    return identity


async def get_target_tenant_id(
    identity: Annotated[Identity | None, Depends(get_optional_identity)],
    tenant_id: Annotated[str | None, Query(min_length=1)] = None,
) -> str:
    """Resolve the tenant a read request is about.

    An explicit ``tenant_id`` query parameter wins; otherwise the
    caller's own tenant is used.

    Raises:
        ValidationError: If neither is available
    """
    if tenant_id:
        return tenant_id
    if identity is not None:
        return identity.tenant_id
    raise ValidationError(
        "Tenant ID is required",
        error_code="tenant_required",
    )


# Type aliases for cleaner dependency injection
AdminIdentity = Annotated[Identity, Depends(get_admin_identity)]
TargetTenantId = Annotated[str, Depends(get_target_tenant_id)]
