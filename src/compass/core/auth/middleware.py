"""Request id and tenant context middleware."""

import uuid
from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from compass.core.auth.backend import auth_backend


if TYPE_CHECKING:
    from starlette.types import ASGIApp


class TenantContextMiddleware(BaseHTTPMiddleware):
    """Middleware that records the caller's tenant for logging.

    Authorization itself happens in the route dependencies; this only
    copies tenant and user ids to ``request.state`` and the structlog
    context when a valid token is present.
    """

    def __init__(
        self,
        app: "ASGIApp",
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = tuple(
            exclude_paths or ["/health", "/docs", "/redoc", "/openapi.json"]
        )

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Inject tenant context and pass the request on."""
        if request.url.path.startswith(self.exclude_paths):
            return await call_next(request)

        auth_header = request.headers.get("Authorization")
        if auth_header and auth_header.startswith("Bearer "):
            identity = auth_backend.authenticate(auth_header.split(" ", 1)[1])

            if identity is not None:
                request.state.tenant_id = identity.tenant_id
                request.state.user_id = identity.user_id
                structlog.contextvars.bind_contextvars(
                    tenant_id=identity.tenant_id,
                    user_id=identity.user_id,
                )

        return await call_next(request)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that adds a unique request ID to each request.

    The id is taken from ``X-Request-ID`` when the caller sends one and
    is echoed back on the response.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process the request and add request ID."""
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        request.state.request_id = request_id
        request.state.trace_id = request_id  # Alias for error handler

        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars(
                "request_id", "tenant_id", "user_id"
            )

        response.headers["X-Request-ID"] = request_id
        return response
