"""Root API router: probes, app info and the versioned module routes."""

import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from compass import __version__
from compass.api.dependencies import DBSession
from compass.config import settings
from compass.modules import discover_modules


logger = structlog.get_logger()


class HealthResponse(BaseModel):
    status: str


class ReadinessResponse(BaseModel):
    """Readiness result.

    Only ``database`` gates readiness. ``blob_storage`` is informational:
    without it the API still serves cards and themes, uploads fail.
    """

    status: str
    checks: dict[str, str]


class InfoResponse(BaseModel):
    app: str
    version: str
    environment: str
    debug: bool
    integrations: dict[str, bool]


health_router = APIRouter(tags=["health"])


@health_router.get("/health/live", response_model=HealthResponse, summary="Liveness probe")
async def liveness() -> HealthResponse:
    return HealthResponse(status="alive")


@health_router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    responses={503: {"model": ReadinessResponse}},
)
async def readiness(db: DBSession) -> JSONResponse:
    """Check the database and report blob storage configuration."""
    try:
        await db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error("readiness_database_failed", error=str(e))
        database = "unavailable"

    body = ReadinessResponse(
        status="ready" if database == "ok" else "degraded",
        checks={
            "database": database,
            "blob_storage": "ok" if settings.blob_read_write_token else "not_configured",
        },
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK
        if database == "ok"
        else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(),
    )


@health_router.get("/info", response_model=InfoResponse, summary="Application info")
async def info() -> InfoResponse:
    """Application metadata and which optional integrations are configured."""
    return InfoResponse(
        app=settings.app_name,
        version=__version__,
        environment=settings.environment,
        debug=settings.debug,
        integrations={
            "blob_storage": settings.blob_read_write_token is not None,
            "tracing": settings.otlp_endpoint is not None,
        },
    )


# Module routers live under /api/v1; probes stay at the root.
v1_router = APIRouter(prefix="/api/v1")
for module_router in discover_modules():
    v1_router.include_router(module_router)

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(v1_router)
