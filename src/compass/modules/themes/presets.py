"""Built-in theme presets.

``default-dark`` doubles as the default theme served to tenants that
never saved one.
"""

from compass.modules.themes.schemas import (
    FontFamilies,
    ThemeColors,
    ThemeMode,
    ThemePreset,
    ThemeSpacing,
    ThemeTypography,
)


DEFAULT_PRESET_ID = "default-dark"

_TYPOGRAPHY = ThemeTypography(
    font_family=FontFamilies(
        heading="var(--font-inter), system-ui, sans-serif",
        body="var(--font-inter), system-ui, sans-serif",
        mono="var(--font-geist-mono), ui-monospace, monospace",
    ),
    font_size={
        "xs": "0.75rem",
        "sm": "0.875rem",
        "base": "1rem",
        "lg": "1.125rem",
        "xl": "1.25rem",
        "2xl": "1.5rem",
        "3xl": "1.875rem",
        "4xl": "2.25rem",
        "5xl": "3rem",
    },
    font_weight={
        "light": 300,
        "normal": 400,
        "medium": 500,
        "semibold": 600,
        "bold": 700,
        "extrabold": 800,
    },
    line_height={
        "tight": "1.25",
        "normal": "1.5",
        "relaxed": "1.75",
    },
)

_BORDER_RADIUS = {
    "sm": "0.375rem",
    "md": "0.5rem",
    "lg": "0.75rem",
    "xl": "1rem",
    "2xl": "1.5rem",
    "full": "9999px",
}


DEFAULT_DARK = ThemePreset(
    id=DEFAULT_PRESET_ID,
    name="Default Dark",
    colors=ThemeColors(
        primary="#fa4616",
        primary_hover="#e03d12",
        secondary="#262626",
        accent="#fa4616",
        background="#141212",
        surface="#262626",
        elevated="#333333",
        foreground="#fafafa",
        muted="#7f7f7f",
        subtle="#9ca3af",
        border="#7f7f7f",
        border_focus="#fa4616",
        success="#10b981",
        warning="#f59e0b",
        error="#ef4444",
        info="#3b82f6",
    ),
    typography=_TYPOGRAPHY,
    spacing=ThemeSpacing(scale=1),
    border_radius=_BORDER_RADIUS,
    mode=ThemeMode.DARK,
)

DEFAULT_LIGHT = DEFAULT_DARK.model_copy(
    update={
        "id": "default-light",
        "name": "Default Light",
        "colors": DEFAULT_DARK.colors.model_copy(
            update={
                "secondary": "#f0f0f0",
                "background": "#fafafa",
                "surface": "#ffffff",
                "elevated": "#f8f8f8",
                "foreground": "#141212",
                "border": "#dfdfdf",
                "success": "#059669",
                "warning": "#d97706",
                "error": "#dc2626",
                "info": "#2563eb",
            }
        ),
        "mode": ThemeMode.LIGHT,
    }
)

MINIMAL = DEFAULT_DARK.model_copy(
    update={
        "id": "minimal",
        "name": "Minimal",
        "colors": ThemeColors(
            primary="#000000",
            primary_hover="#1a1a1a",
            secondary="#f5f5f5",
            accent="#000000",
            background="#ffffff",
            surface="#fafafa",
            elevated="#f5f5f5",
            foreground="#000000",
            muted="#737373",
            subtle="#a3a3a3",
            border="#e5e5e5",
            border_focus="#000000",
            success="#22c55e",
            warning="#eab308",
            error="#ef4444",
            info="#3b82f6",
        ),
        "mode": ThemeMode.LIGHT,
    }
)

PROFESSIONAL = DEFAULT_DARK.model_copy(
    update={
        "id": "professional",
        "name": "Professional",
        "colors": ThemeColors(
            primary="#1e40af",
            primary_hover="#1e3a8a",
            secondary="#475569",
            accent="#0ea5e9",
            background="#0f172a",
            surface="#1e293b",
            elevated="#334155",
            foreground="#f8fafc",
            muted="#94a3b8",
            subtle="#cbd5e1",
            border="#475569",
            border_focus="#0ea5e9",
            success="#10b981",
            warning="#f59e0b",
            error="#ef4444",
            info="#3b82f6",
        ),
        "mode": ThemeMode.DARK,
    }
)

PRESETS: dict[str, ThemePreset] = {
    preset.id: preset for preset in (DEFAULT_DARK, DEFAULT_LIGHT, MINIMAL, PROFESSIONAL)
}


def get_default_theme() -> ThemePreset:
    """Return the theme used by tenants without a saved one."""
    return PRESETS[DEFAULT_PRESET_ID]


def get_preset(preset_id: str) -> ThemePreset | None:
    """Look up a preset by id."""
    return PRESETS.get(preset_id)
