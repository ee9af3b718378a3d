"""Build the component tree from a decoded style document."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple

from ..config.profile_loader import ClassificationProfile
from ..config.profile_manager import get_profile
from ..models.style_component import StyleComponent, StyleSubcomponent
from ..models.style_key import StyleKey
from .json_scanner import JSONPath, LineIndex
from .key_classification import classify_type, is_subcomponent, should_skip, stringify_value
from .labels import describe_key, title_case
from .errors import DocumentLoadError

logger = logging.getLogger(__name__)

COMMENT_KEY = "__comment"


def parse_document(
    root: Any,
    line_index: Optional[LineIndex] = None,
    profile: Optional[ClassificationProfile] = None,
) -> List[StyleComponent]:
    """Parse the root mapping into components.

    Reserved top-level members (semantic_tokens) and non-object members are
    skipped. Line numbers are filled in from line_index when given.

    Args:
        root: Decoded JSON document
        line_index: Line positions from scan_json over the same text
        profile: Classification rules (active profile if None)

    Returns:
        Components in document order

    Raises:
        DocumentLoadError: If root is not a JSON object
    """
    if not isinstance(root, Mapping):
        raise DocumentLoadError(
            f"Style document root must be a JSON object, got {type(root).__name__}"
        )

    profile = profile or get_profile()
    index = line_index or LineIndex()
    components: List[StyleComponent] = []

    for component_id, body in root.items():
        if component_id in profile.reserved_keys:
            logger.debug("Skipping reserved member %r", component_id)
            continue
        if not isinstance(body, Mapping):
            logger.debug("Skipping non-object top-level member %r", component_id)
            continue
        components.append(_parse_component(component_id, body, index, profile))

    logger.info(f"Parsed {len(components)} components")
    return components


def _parse_component(
    component_id: str,
    body: Mapping[str, Any],
    index: LineIndex,
    profile: ClassificationProfile,
) -> StyleComponent:
    base: JSONPath = (component_id,)
    keys: List[StyleKey] = []
    subcomponents: List[StyleSubcomponent] = []

    for name, value in body.items():
        if name == COMMENT_KEY:
            continue
        if isinstance(value, Mapping):
            if is_subcomponent(name, value, profile):
                subcomponents.append(_parse_subcomponent(base, name, value, index, profile))
            else:
                keys.extend(_collect_keys(base, (name,), value, index, profile))
        elif isinstance(value, list):
            logger.debug("Skipping array member %s.%s", component_id, name)
        else:
            key = _make_key(base, (name,), value, index, profile)
            if key is not None:
                keys.append(key)

    start, end = _range(index, base)
    return StyleComponent(
        id=component_id,
        label=title_case(component_id),
        keys=keys,
        subcomponents=subcomponents,
        comment=_comment(body),
        start_line_number=start,
        end_line_number=end,
    )


def _parse_subcomponent(
    base: JSONPath,
    subcomponent_id: str,
    body: Mapping[str, Any],
    index: LineIndex,
    profile: ClassificationProfile,
) -> StyleSubcomponent:
    sub_base = base + (subcomponent_id,)
    keys: List[StyleKey] = []
    for name, value in body.items():
        if name == COMMENT_KEY:
            continue
        keys.extend(_collect_keys(sub_base, (name,), value, index, profile))

    start, end = _range(index, sub_base)
    return StyleSubcomponent(
        id=subcomponent_id,
        label=title_case(subcomponent_id),
        keys=keys,
        comment=_comment(body),
        start_line_number=start,
        end_line_number=end,
    )


def _collect_keys(
    base: JSONPath,
    rel_path: JSONPath,
    value: Any,
    index: LineIndex,
    profile: ClassificationProfile,
) -> List[StyleKey]:
    """Flatten a member into keys; nested objects become dotted ids."""
    if isinstance(value, Mapping):
        keys: List[StyleKey] = []
        for name, child in value.items():
            if name == COMMENT_KEY:
                continue
            keys.extend(_collect_keys(base, rel_path + (name,), child, index, profile))
        return keys
    if isinstance(value, list):
        logger.debug("Skipping array member %s", ".".join(base + rel_path))
        return []
    key = _make_key(base, rel_path, value, index, profile)
    return [key] if key is not None else []


def _make_key(
    base: JSONPath,
    rel_path: JSONPath,
    value: Any,
    index: LineIndex,
    profile: ClassificationProfile,
) -> Optional[StyleKey]:
    name = rel_path[-1]
    ancestors = base + rel_path[:-1]
    if should_skip(name, value, ancestors, profile):
        return None

    label, comment = describe_key(rel_path)
    return StyleKey(
        id=".".join(rel_path),
        label=label,
        type=classify_type(name, value, profile),
        value=stringify_value(value),
        comment=comment,
        line_number=index.line_for(base + rel_path),
        value_span=index.value_span_for(base + rel_path),
        path=rel_path,
    )


def _range(index: LineIndex, path: JSONPath) -> Tuple[Optional[int], Optional[int]]:
    line_range = index.range_for(path)
    if line_range is None:
        return None, None
    return line_range


def _comment(body: Mapping[str, Any]) -> Optional[str]:
    comment = body.get(COMMENT_KEY)
    return comment if isinstance(comment, str) else None
