"""Pydantic schemas for theme operations."""

from datetime import datetime
from enum import StrEnum

from pydantic import Field

from compass.core.constants import DEFAULT_THEME_NAME, MAX_THEME_NAME_LENGTH
from compass.core.schemas import CamelModel


class ThemeMode(StrEnum):
    """Color scheme the theme is designed for."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class ThemeColors(CamelModel):
    """Color tokens keyed by semantic role."""

    # Brand
    primary: str
    primary_hover: str
    secondary: str
    accent: str

    # Backgrounds
    background: str
    surface: str
    elevated: str

    # Text
    foreground: str
    muted: str
    subtle: str

    # Borders
    border: str
    border_focus: str

    # States
    success: str
    warning: str
    error: str
    info: str


class FontFamilies(CamelModel):
    """Font stacks per text role."""

    heading: str
    body: str
    mono: str


class ThemeTypography(CamelModel):
    """Typography tokens.

    Size, weight and line-height scales are keyed by token name
    (``"xs"``, ``"2xl"``, ``"semibold"``...), so they are plain mappings.
    """

    font_family: FontFamilies
    font_size: dict[str, str]
    font_weight: dict[str, int]
    line_height: dict[str, str]


class ThemeSpacing(CamelModel):
    """Spacing multiplier (1 is default, 1.5 generous, 0.75 compact)."""

    scale: float = Field(1, gt=0)


class ThemeConfig(CamelModel):
    """The editable part of a theme."""

    name: str = Field(DEFAULT_THEME_NAME, min_length=1, max_length=MAX_THEME_NAME_LENGTH)
    colors: ThemeColors
    typography: ThemeTypography
    spacing: ThemeSpacing
    border_radius: dict[str, str]
    mode: ThemeMode = ThemeMode.DARK
    custom_css: str | None = Field(None, alias="customCSS")


class ThemeResponse(ThemeConfig):
    """A theme as returned by the API.

    ``id`` is the database id of a saved theme or the preset id of the
    default theme.
    """

    id: str
    tenant_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ThemeEnvelope(CamelModel):
    """Theme wrapper: ``{"theme": {...}, "isDefault": bool}``."""

    theme: ThemeResponse
    is_default: bool
    message: str | None = None


class ThemeUpsertRequest(CamelModel):
    """Schema for saving a tenant theme.

    ``tenant_id`` may be sent for clarity; it must match the admin's own
    tenant.
    """

    tenant_id: str | None = None
    theme: ThemeConfig


class ThemePreset(ThemeConfig):
    """A named theme from the built-in catalogue."""

    id: str


class PresetListResponse(CamelModel):
    """Preset catalogue wrapper: ``{"presets": [...]}``."""

    presets: list[ThemePreset]
