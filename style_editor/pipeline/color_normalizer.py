"""Utilities for parsing and formatting hex color strings."""

import re
from typing import Tuple

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")

RGBA = Tuple[int, int, int, int]


def parse_hex_color(text: str) -> RGBA:
    """Parse a hex color string to (red, green, blue, alpha) in 0-255.

    Rules:
    - Leading '#' and surrounding whitespace are ignored
    - 3 digits: RGB shorthand, each digit doubled (#F0A -> #FF00AA)
    - 6 digits: RRGGBB, alpha 255
    - 8 digits: AARRGGBB (alpha first)
    - Raise ValueError for anything else
    """
    if text is None:
        raise ValueError("Input text is None")

    raw = text.strip()
    if raw.startswith("#"):
        raw = raw[1:]
    if not _HEX_PATTERN.fullmatch(raw):
        raise ValueError(f"Invalid hex color: {text!r}")

    value = int(raw, 16)
    if len(raw) == 3:
        return ((value >> 8) * 17, (value >> 4 & 0xF) * 17, (value & 0xF) * 17, 255)
    if len(raw) == 6:
        return (value >> 16, value >> 8 & 0xFF, value & 0xFF, 255)
    if len(raw) == 8:
        return (value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF, value >> 24)

    raise ValueError(f"Invalid hex color length: {text!r}")


def is_hex_color(text: str) -> bool:
    try:
        parse_hex_color(text)
    except ValueError:
        return False
    return True


def format_hex_color(red: int, green: int, blue: int) -> str:
    """Format channels as uppercase #RRGGBB (channels clamped to 0-255)."""
    channels = [max(0, min(255, int(round(c)))) for c in (red, green, blue)]
    return "#{:02X}{:02X}{:02X}".format(*channels)


def relative_luminance(text: str) -> float:
    """WCAG relative luminance of a hex color, used to pick readable text on swatches."""
    red, green, blue, _ = parse_hex_color(text)

    def _linear(channel: int) -> float:
        c = channel / 255.0
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * _linear(red) + 0.7152 * _linear(green) + 0.0722 * _linear(blue)
