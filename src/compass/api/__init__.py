"""API layer - routing and dependencies."""

from compass.api.router import api_router


__all__ = ["api_router"]
