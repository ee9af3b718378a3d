"""Preview background mode."""

from enum import Enum


class PreviewMode(str, Enum):
    LIGHT = "Light"
    DARK = "Dark"

    def toggled(self) -> "PreviewMode":
        return PreviewMode.DARK if self is PreviewMode.LIGHT else PreviewMode.LIGHT
