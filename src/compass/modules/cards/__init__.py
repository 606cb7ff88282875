"""Cards module for ordered onboarding content."""

from fastapi import APIRouter


router = APIRouter(prefix="/cards", tags=["cards"])

# Import routes to register them (must be after router is defined)
from compass.modules.cards import routes  # noqa: F401, E402
