"""Themes module for per-tenant visual customization."""

from fastapi import APIRouter


router = APIRouter(prefix="/themes", tags=["themes"])

# Import routes to register them (must be after router is defined)
from compass.modules.themes import routes  # noqa: F401, E402
