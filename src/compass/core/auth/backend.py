"""Platform user token verification.

The host platform signs a short-lived JWT for every user it embeds the
app for. This module decodes those tokens into an :class:`Identity`;
issuing tokens is only needed by tests and local tooling.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from compass.config import settings
from compass.core.auth.schemas import Identity
from compass.core.constants import ACCESS_LEVEL_ADMIN, ACCESS_LEVEL_NONE


DEFAULT_TOKEN_LIFETIME = timedelta(minutes=15)


def create_access_token(
    user_id: str,
    tenant_id: str,
    access_level: str = ACCESS_LEVEL_ADMIN,
    expires_delta: timedelta | None = None,
    additional_claims: dict[str, Any] | None = None,
) -> str:
    """Create a platform-style user token.

    Args:
        user_id: Platform user id
        tenant_id: Company id the token is scoped to
        access_level: Caller's access level for that company
        expires_delta: Optional custom expiration time
        additional_claims: Optional extra claims to include

    Returns:
        Encoded JWT
    """
    now = datetime.now(UTC)
    to_encode: dict[str, Any] = {
        "sub": user_id,
        "tenant_id": tenant_id,
        "access_level": access_level,
        "iat": now,
        "exp": now + (expires_delta or DEFAULT_TOKEN_LIFETIME),
    }

    if additional_claims:
        to_encode.update(additional_claims)

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> Identity | None:
    """Decode and validate a platform user token.

    Args:
        token: The JWT to decode

    Returns:
        Identity if valid, None if invalid, expired or missing claims
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None

    user_id = payload.get("sub")
    tenant_id = payload.get("tenant_id")
    exp = payload.get("exp")

    if not user_id or not tenant_id or exp is None:
        return None

    return Identity(
        user_id=str(user_id),
        tenant_id=str(tenant_id),
        access_level=payload.get("access_level", ACCESS_LEVEL_NONE),
        exp=datetime.fromtimestamp(exp, tz=UTC),
    )


class PlatformAuthBackend:
    """Auth collaborator resolving credentials into identities.

    Capability checks are the platform's job: the token's
    ``access_level`` claim is taken as-is.
    """

    def authenticate(self, token: str | None) -> Identity | None:
        """Return the caller identity, or None when unauthenticated."""
        if not token:
            return None
        return decode_token(token)


auth_backend = PlatformAuthBackend()
