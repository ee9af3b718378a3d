"""Classification heuristics for style document members.

Decides which nested objects are subcomponents, which primitive values are
editable style keys, and what StyleType each key gets. All marker lists come
from the active ClassificationProfile.
"""

from __future__ import annotations

import json
import re
from typing import Any, Mapping, Optional, Sequence

from ..config.profile_loader import ClassificationProfile
from ..models.style_key import StyleType

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def stringify_value(value: Any) -> str:
    """String form of a JSON primitive as stored in StyleKey.value.

    Strings are kept verbatim; booleans become "true"/"false", None becomes
    "null" and numbers use their JSON spelling.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _contains_any(name: str, markers: Sequence[str]) -> bool:
    lowered = name.lower()
    return any(marker.lower() in lowered for marker in markers)


def is_subcomponent(name: str, value: Mapping[str, Any], profile: ClassificationProfile) -> bool:
    """True when a nested object looks like an independently editable style group.

    The object's own direct key names must contain a style marker (color,
    padding, ...) and its name must not be a state modifier such as "hover".
    """
    if name in profile.state_modifiers:
        return False
    return any(_contains_any(child, profile.subcomponent_markers) for child in value)


def should_skip(
    name: str,
    value: Any,
    ancestors: Sequence[str],
    profile: ClassificationProfile,
) -> bool:
    """True for non-style data: nulls, embedded assets, long strings, icon/logo members.

    Args:
        name: Leaf key name
        value: Decoded JSON primitive
        ancestors: Path segments above the key (component, subcomponent, groups)
        profile: Active classification profile
    """
    text = stringify_value(value)
    if text in ("nil", "null"):
        return True
    if any(text.startswith(prefix) for prefix in profile.skip_value_prefixes):
        return True
    if len(text) > profile.max_value_length:
        return True
    if _contains_any(name, profile.skip_name_markers):
        return True
    return any(_contains_any(segment, profile.skip_ancestor_markers) for segment in ancestors)


def _is_integer(text: str) -> bool:
    return _INTEGER_PATTERN.fullmatch(text) is not None


def classify_type(name: str, value: Any, profile: Optional[ClassificationProfile] = None) -> StyleType:
    """StyleType for a primitive value.

    Order: '#'-prefixed value or color-like key name -> color; "true"/"false"
    -> bool; integer -> number; anything else -> string.
    """
    color_markers = profile.color_name_markers if profile else ("color", "background", "border")
    text = stringify_value(value)
    if text.startswith("#") or _contains_any(name, color_markers):
        return StyleType.COLOR
    if text in ("true", "false"):
        return StyleType.BOOL
    if _is_integer(text):
        return StyleType.NUMBER
    return StyleType.STRING
