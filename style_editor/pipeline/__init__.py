"""Pipeline stages: scan, classify and parse the style document; render snippets."""

from .color_normalizer import format_hex_color, is_hex_color, parse_hex_color
from .token_palette import TokenPalette

__all__ = ["TokenPalette", "format_hex_color", "is_hex_color", "parse_hex_color"]
