"""UI theme package: design tokens, QSS, and apply_theme."""

from .tokens import (
    colors,
    type_badge_colors,
    spacing,
    typography,
    radius,
)
from .apply_theme import apply_theme

__all__ = [
    "apply_theme",
    "colors",
    "type_badge_colors",
    "spacing",
    "typography",
    "radius",
]
