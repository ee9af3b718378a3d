"""StyleKey data model representing a single editable style property."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from ..pipeline.color_normalizer import is_hex_color

TypedValue = Union[bool, int, float, str]

_TOKEN_PATH_PATTERN = re.compile(r"[A-Za-z0-9_\-]+(\.[A-Za-z0-9_\-]+)*")


class StyleType(str, Enum):
    """Semantic type of a style value (drives which editor control is shown)."""

    COLOR = "color"
    FONT = "font"
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"


class InvalidValueError(ValueError):
    """Raised when a typed value does not fit the key's StyleType."""
    pass


def _parse_number(text: str) -> Union[int, float]:
    raw = text.strip()
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidValueError(f"Not a number: {text!r}") from exc


def encode_value(style_type: StyleType, value: TypedValue) -> str:
    """Validate a typed value and return its string encoding.

    Rules:
    - bool: True/False or the strings "true"/"false"
    - number: int/float or a numeric string (ints stay ints, 2.0 stays "2.0")
    - color: hex color (#RGB, #RRGGBB, #AARRGGBB) or a dotted semantic token path
    - font/string: any string

    Raises:
        InvalidValueError: If value does not fit style_type
    """
    if style_type is StyleType.BOOL:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str) and value in ("true", "false"):
            return value
        raise InvalidValueError(f"Not a boolean: {value!r}")

    if style_type is StyleType.NUMBER:
        if isinstance(value, bool):
            raise InvalidValueError(f"Not a number: {value!r}")
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            _parse_number(value)
            return value.strip()
        raise InvalidValueError(f"Not a number: {value!r}")

    if not isinstance(value, str):
        raise InvalidValueError(f"Expected text for {style_type.value}: {value!r}")

    if style_type is StyleType.COLOR:
        text = value.strip()
        if text.startswith("#"):
            if not is_hex_color(text):
                raise InvalidValueError(f"Invalid hex color: {value!r}")
            return text
        if not _TOKEN_PATH_PATTERN.fullmatch(text):
            raise InvalidValueError(f"Not a color or token path: {value!r}")
        return text

    return value


@dataclass
class StyleKey:
    """A single editable style property.

    All values are stored as text so they can be written back into
    source snippets verbatim; ``typed_value`` / ``set_typed_value`` give a
    typed view validated on write.

    Attributes:
        id: Dotted or local property name, unique among siblings
        label: Human-friendly display name
        type: StyleType of the value
        value: Current value (always a string)
        comment: Optional help text
        line_number: 1-based line of the property in the source text
        path: JSON key segments relative to the owning node
        value_span: (line, start column, end column) of the value literal in
            the source text, when known
    """

    id: str
    label: str
    type: StyleType
    value: str
    comment: Optional[str] = None
    line_number: Optional[int] = None
    path: Tuple[str, ...] = field(default_factory=tuple)
    value_span: Optional[Tuple[int, int, int]] = None

    def __post_init__(self):
        if not self.path:
            self.path = tuple(self.id.split("."))

    @property
    def name(self) -> str:
        """Leaf property name as written in the source document."""
        return self.path[-1]

    @property
    def typed_value(self) -> TypedValue:
        """Value converted according to type; falls back to the raw text when unparseable."""
        if self.type is StyleType.BOOL:
            return self.value == "true"
        if self.type is StyleType.NUMBER:
            try:
                return _parse_number(self.value)
            except InvalidValueError:
                return self.value
        return self.value

    def set_typed_value(self, value: TypedValue) -> None:
        self.value = encode_value(self.type, value)
