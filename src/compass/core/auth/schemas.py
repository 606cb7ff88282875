"""Authentication schemas for platform identities."""

from datetime import datetime

from pydantic import BaseModel

from compass.core.constants import ACCESS_LEVEL_ADMIN


class Identity(BaseModel):
    """The caller as vouched for by the host platform.

    Attributes:
        user_id: Platform user id
        tenant_id: Company the token was issued for
        access_level: ``admin``, ``customer`` or ``no_access``
        exp: Token expiration time
    """

    user_id: str
    tenant_id: str
    access_level: str
    exp: datetime

    @property
    def is_admin(self) -> bool:
        """Whether the caller may manage the tenant's cards and theme."""
        return self.access_level == ACCESS_LEVEL_ADMIN
