"""Snippet rendering: line-accurate excerpts of the source document with edits patched in.

The snippet is the original text of the selected component or subcomponent,
cut out by line range, with only the values of changed keys rewritten. All
other text is returned byte-for-byte, so comments, quoting and ordering
survive and the snippet can be pasted back into the source file.
"""

from __future__ import annotations

import json
import logging
import re
from typing import AbstractSet, List, Mapping, Optional, Tuple, Union

from ..models.changed_tokens import ChangedTokensSummary
from ..models.style_component import StyleComponent, StyleSubcomponent
from ..models.style_key import InvalidValueError, StyleKey, StyleType, encode_value

logger = logging.getLogger(__name__)

StyleNode = Union[StyleComponent, StyleSubcomponent]
CurrentValues = Mapping[str, Union[str, Mapping[str, str]]]

_INDENT_PATTERN = re.compile(r"[ \t]*")


def split_lines(text: str) -> List[str]:
    """Split on newlines; a trailing newline does not add an empty last line."""
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def _starts_with_key(line: str, key: StyleKey) -> bool:
    return any(line.strip().startswith(f'"{name}":') for name in (key.id, key.name))


def _find_line(lines: List[str], key: StyleKey, start: int) -> Optional[int]:
    """Position of the line that opens with the key's name inside the extracted range."""
    if key.line_number is not None:
        offset = key.line_number - start
        if 0 <= offset < len(lines) and _starts_with_key(lines[offset], key):
            return offset

    for name in dict.fromkeys((key.id, key.name)):
        prefix = f'"{name}":'
        for offset, line in enumerate(lines):
            if line.strip().startswith(prefix):
                return offset
    return None


def _value_literal(key: StyleKey, original: str) -> str:
    """JSON literal for the key's value, keeping unquoted numbers/booleans unquoted."""
    was_quoted = original.lstrip().startswith('"')
    if not was_quoted and key.type in (StyleType.NUMBER, StyleType.BOOL):
        try:
            return encode_value(key.type, key.value)
        except InvalidValueError:
            pass
    return json.dumps(key.value, ensure_ascii=False)


def splice_value(line: str, start: int, end: int, key: StyleKey) -> str:
    """Replace the value literal at columns [start, end) and nothing else."""
    return line[:start] + _value_literal(key, line[start:end]) + line[end:]


def patch_line(line: str, key: StyleKey) -> str:
    """Rewrite one single-member property line with the key's current value.

    Indentation and any trailing comma of the original line are preserved;
    a carriage return at the end of the line is kept too. Only used when the
    value's column span is unknown.
    """
    carriage = "\r" if line.endswith("\r") else ""
    body = line[:-1] if carriage else line
    indent = _INDENT_PATTERN.match(body).group(0)
    _, _, rest = body.partition(":")
    comma = "," if body.rstrip().endswith(",") else ""
    literal = _value_literal(key, rest)
    name = json.dumps(key.name, ensure_ascii=False)
    return f"{indent}{name}: {literal}{comma}{carriage}"


def render_snippet(node: StyleNode, changed_keys: AbstractSet[str], source_text: str) -> str:
    """Render the node's source lines with changed values patched in place.

    Values with a known column span are spliced exactly, so several members
    sharing one line (inline objects) keep their neighbours. Keys without a
    span fall back to rewriting their line, but only when that line starts
    with the key's name.

    Args:
        node: Component or subcomponent carrying its source line range
        changed_keys: Ids of keys edited within this node
        source_text: Full original document text

    Returns:
        The patched excerpt, or "" when the node has no usable line range
    """
    start, end = node.start_line_number, node.end_line_number
    lines = split_lines(source_text)
    if start is None or end is None or start < 1 or start > end or end > len(lines):
        logger.warning(
            "No snippet range for %r (lines %s-%s of %d)", node.id, start, end, len(lines)
        )
        return ""

    excerpt = lines[start - 1:end]
    splices: List[Tuple[int, int, int, StyleKey]] = []
    for key in node.keys:
        if key.id not in changed_keys:
            continue
        span = key.value_span
        if span is not None and start <= span[0] <= end and span[2] <= len(excerpt[span[0] - start]):
            splices.append((span[0] - start, span[1], span[2], key))
            continue
        offset = _find_line(excerpt, key, start)
        if offset is None:
            logger.warning("Changed key %r has no patchable line in snippet for %r", key.id, node.id)
            continue
        excerpt[offset] = patch_line(excerpt[offset], key)

    # Right to left so earlier columns on the same line stay valid
    for offset, col_start, col_end, key in sorted(splices, key=lambda s: (s[0], s[1]), reverse=True):
        excerpt[offset] = splice_value(excerpt[offset], col_start, col_end, key)

    return "\n".join(excerpt)


def render_changed_tokens_summary(
    component_id: Optional[str],
    changed_keys: AbstractSet[str],
    current_values: CurrentValues,
) -> str:
    """Summarize edited values as {"component_updates": {component_id: {key: value}}}.

    Nested mappings in current_values (subcomponent id -> key values) are
    emitted as nested objects. Only ids in changed_keys are included.
    """
    updates = {}
    for key_id in sorted(current_values):
        value = current_values[key_id]
        if isinstance(value, Mapping):
            nested = {k: value[k] for k in sorted(value) if k in changed_keys}
            if nested:
                updates[key_id] = nested
        elif key_id in changed_keys:
            updates[key_id] = value

    if component_id is None or not updates:
        return ChangedTokensSummary().to_json()
    return ChangedTokensSummary(component_updates={component_id: updates}).to_json()
