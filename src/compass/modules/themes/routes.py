"""Theme API routes."""

from typing import Annotated

from fastapi import Query, Response, status

from compass.core.auth import AdminIdentity, Identity, TargetTenantId
from compass.core.errors import UnauthorizedError
from compass.core.schemas import SuccessResponse
from compass.modules.themes import router
from compass.modules.themes.schemas import (
    PresetListResponse,
    ThemeEnvelope,
    ThemeUpsertRequest,
)
from compass.modules.themes.services import ThemeSvc


def _ensure_own_tenant(identity: Identity, tenant_id: str | None) -> str:
    """Admins may only change their own tenant's theme."""
    if tenant_id and tenant_id != identity.tenant_id:
        raise UnauthorizedError(
            "Cannot modify another tenant's theme",
            error_code="tenant_mismatch",
        )
    return identity.tenant_id


@router.get(
    "",
    response_model=ThemeEnvelope,
    summary="Get theme",
    description="Get a tenant's theme, or the default theme if none was saved.",
)
async def get_theme(
    service: ThemeSvc,
    tenant_id: TargetTenantId,
) -> ThemeEnvelope:
    """Get the effective theme for a tenant."""
    theme, is_default = await service.get_theme(tenant_id)
    return ThemeEnvelope(theme=theme, is_default=is_default)


@router.get(
    "/presets",
    response_model=PresetListResponse,
    summary="List theme presets",
    description="List the built-in themes admins can start from.",
)
async def list_presets(service: ThemeSvc) -> PresetListResponse:
    """List built-in presets."""
    return PresetListResponse(presets=service.list_presets())


@router.get(
    "/css",
    response_class=Response,
    summary="Get theme stylesheet",
    description="Render a tenant's effective theme as CSS custom properties.",
)
async def get_theme_css(
    service: ThemeSvc,
    tenant_id: TargetTenantId,
) -> Response:
    """Serve the tenant stylesheet."""
    css = await service.render_css(tenant_id)
    return Response(content=css, media_type="text/css")


@router.post(
    "",
    response_model=ThemeEnvelope,
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_201_CREATED: {"model": ThemeEnvelope}},
    summary="Save theme",
    description="Create (201) or update (200) the admin's tenant theme.",
)
async def save_theme(
    data: ThemeUpsertRequest,
    response: Response,
    service: ThemeSvc,
    identity: AdminIdentity,
) -> ThemeEnvelope:
    """Create or update the tenant theme."""
    tenant_id = _ensure_own_tenant(identity, data.tenant_id)
    theme, created = await service.save_theme(tenant_id, data.theme)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return ThemeEnvelope(
        theme=theme,
        is_default=False,
        message="Theme created successfully" if created else "Theme updated successfully",
    )


@router.delete(
    "",
    response_model=SuccessResponse,
    summary="Reset theme",
    description="Delete the saved theme so the tenant falls back to the default.",
)
async def reset_theme(
    service: ThemeSvc,
    identity: AdminIdentity,
    tenant_id: Annotated[str | None, Query()] = None,
) -> SuccessResponse:
    """Reset the tenant theme to default."""
    await service.reset_theme(_ensure_own_tenant(identity, tenant_id))
    return SuccessResponse(message="Theme reset to default successfully")
