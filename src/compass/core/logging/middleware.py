"""Request logging middleware.

Logs every HTTP request and its outcome with structlog. Tenant and
user ids are picked up from ``request.state`` once the tenant context
middleware has resolved the caller.
"""

import time
from typing import Any

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint


logger = structlog.get_logger()

DEFAULT_EXCLUDED_PATHS = (
    "/health/live",
    "/health/ready",
    "/docs",
    "/redoc",
    "/openapi.json",
)


def get_client_ip(request: Request) -> str | None:
    """Extract the real client IP from a request.

    The app is embedded behind the host platform's proxy, so the
    forwarding headers are checked before the socket peer.

    Args:
        request: The incoming request

    Returns:
        The client IP address or None
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # The first entry is the original client
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs request start, completion and failures.

    Completion is logged at error level for 5xx, warning for 4xx and
    info otherwise.
    """

    def __init__(
        self,
        app: Any,
        exclude_paths: list[str] | None = None,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application
            exclude_paths: Path prefixes to skip (health probes, docs)
        """
        super().__init__(app)
        self.exclude_paths = tuple(exclude_paths or DEFAULT_EXCLUDED_PATHS)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process the request and log details."""
        path = request.url.path
        if path.startswith(self.exclude_paths):
            return await call_next(request)

        start_time = time.perf_counter()
        method = request.method

        log_data: dict[str, Any] = {
            "method": method,
            "path": path,
            "client_ip": get_client_ip(request),
        }
        if request.url.query:
            log_data["query"] = str(request.url.query)

        logger.info("request_started", **log_data)

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "request_failed",
                method=method,
                path=path,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                error=str(exc),
            )
            raise

        completion_data: dict[str, Any] = {
            "method": method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
        }

        tenant_id = getattr(request.state, "tenant_id", None)
        user_id = getattr(request.state, "user_id", None)
        if tenant_id:
            completion_data["tenant_id"] = tenant_id
        if user_id:
            completion_data["user_id"] = user_id

        if response.status_code >= 500:
            logger.error("request_completed", **completion_data)
        elif response.status_code >= 400:
            logger.warning("request_completed", **completion_data)
        else:
            logger.info("request_completed", **completion_data)

        return response
