"""Render a theme as a CSS stylesheet of custom properties."""

from compass.modules.themes.schemas import ThemeConfig, ThemeMode


RADIUS_TOKENS = ("sm", "md", "lg", "xl", "2xl", "full")


def render_theme_css(theme: ThemeConfig) -> str:
    """Render a ``:root`` block of CSS variables for a theme.

    The tenant's ``custom_css`` is appended after the block so it can
    override any generated variable.

    Args:
        theme: Theme to render

    Returns:
        Stylesheet text
    """
    colors = theme.colors
    typography = theme.typography

    variables: list[tuple[str, str | int | float]] = [
        # Brand
        ("--brand-primary", colors.primary),
        ("--brand-primary-hover", colors.primary_hover),
        ("--brand-secondary", colors.secondary),
        # Semantic
        ("--background", colors.background),
        ("--foreground", colors.foreground),
        ("--accent", colors.accent),
        ("--muted", colors.muted),
        ("--subtle", colors.subtle),
        ("--border", colors.border),
        ("--border-focus", colors.border_focus),
        ("--surface", colors.surface),
        ("--elevated", colors.elevated),
        # States
        ("--success", colors.success),
        ("--warning", colors.warning),
        ("--error", colors.error),
        ("--info", colors.info),
    ]

    for token in RADIUS_TOKENS:
        if token in theme.border_radius:
            variables.append((f"--radius-{token}", theme.border_radius[token]))

    variables.extend(
        [
            ("--font-heading", typography.font_family.heading),
            ("--font-body", typography.font_family.body),
            ("--font-mono", typography.font_family.mono),
        ]
    )
    variables.extend((f"--text-{k}", v) for k, v in typography.font_size.items())
    variables.extend((f"--font-weight-{k}", v) for k, v in typography.font_weight.items())
    variables.extend((f"--leading-{k}", v) for k, v in typography.line_height.items())

    # 1.0 renders as "1"
    scale = theme.spacing.scale
    variables.append(("--spacing-scale", int(scale) if scale == int(scale) else scale))

    lines = [":root {", f"  color-scheme: {_color_scheme(theme)};"]
    lines.extend(f"  {name}: {value};" for name, value in variables)
    lines.append("}")

    css = "\n".join(lines)
    if theme.custom_css and theme.custom_css.strip():
        css = f"{css}\n\n{theme.custom_css.strip()}"
    return css + "\n"


def _color_scheme(theme: ThemeConfig) -> str:
    if theme.mode == ThemeMode.AUTO:
        return "light dark"
    return ThemeMode(theme.mode).value
