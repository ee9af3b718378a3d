"""Data models for the style document."""

from .style_key import InvalidValueError, StyleKey, StyleType, encode_value
from .style_component import StyleComponent, StyleSubcomponent
from .style_document import StyleDocument
from .preview_mode import PreviewMode

__all__ = [
    "InvalidValueError",
    "PreviewMode",
    "StyleComponent",
    "StyleDocument",
    "StyleKey",
    "StyleSubcomponent",
    "StyleType",
    "encode_value",
]
