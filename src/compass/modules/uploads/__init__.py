"""Uploads module for card banner media."""

from fastapi import APIRouter


router = APIRouter(prefix="/uploads", tags=["uploads"])

# Import routes to register them (must be after router is defined)
from compass.modules.uploads import routes  # noqa: F401, E402
