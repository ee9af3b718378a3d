"""Design tokens for the editor's own chrome: colors, spacing, typography, radius.

Used by apply_theme for programmatic styling (e.g. font) and by views that
style individual widgets. QSS (app_style.qss) uses matching values.
"""

# -----------------------------------------------------------------------------
# Colors (hex for QSS compatibility when substituted; names for code)
# -----------------------------------------------------------------------------
colors = {
    "primary": "#1A73E8",
    "primary_hover": "#1557B0",
    "background": "#F8F9FA",
    "surface": "#FFFFFF",
    "text": "#202124",
    "text_muted": "#5F6368",
    "border": "#DADCE0",
    "changed": "#E37400",
    "error": "#D93025",
    "preview_light": "#FFFFFF",
    "preview_dark": "#121212",
}

# Badge color per StyleType value
type_badge_colors = {
    "color": "#1A73E8",
    "font": "#8E24AA",
    "string": "#188038",
    "number": "#E37400",
    "bool": "#D93025",
}

# -----------------------------------------------------------------------------
# Spacing (pixels)
# -----------------------------------------------------------------------------
spacing = {
    "xs": 2,
    "sm": 4,
    "md": 8,
    "lg": 16,
    "xl": 24,
}

# -----------------------------------------------------------------------------
# Typography
# -----------------------------------------------------------------------------
typography = {
    "font_family": "Segoe UI",
    "font_family_fallback": "Helvetica Neue",
    "font_family_mono": "Menlo",
    "font_size_base": 10,
    "font_size_small": 9,
    "font_size_large": 12,
}

# -----------------------------------------------------------------------------
# Radius (px) for rounded corners
# -----------------------------------------------------------------------------
radius = {
    "radius_sm": 3,
    "radius_md": 6,
    "radius_lg": 12,
}

__all__ = ["colors", "type_badge_colors", "spacing", "typography", "radius"]
