"""Position-aware JSON scanning.

Decodes a JSON document in a single pass while recording, for every object
member, the source line of its key, (for object/array values) the line
range up to the closing bracket and (for scalars) the exact column span of
the value literal. The resulting LineIndex lets the snippet
engine cut exact text ranges out of the original file instead of
re-serializing JSON, which would lose formatting and field order.

Paths are tuples of object keys from the root, e.g. ("chat", "header",
"background_color"). Array elements use "[i]" segments.
"""

from __future__ import annotations

import bisect
import json
import logging
import re
from dataclasses import dataclass, field
from json.decoder import JSONDecoder, scanstring
from typing import Any, Dict, List, Optional, Tuple

JSONPath = Tuple[str, ...]
LineRange = Tuple[int, int]
# (line, start column, end column); columns are 0-based, end exclusive
ValueSpan = Tuple[int, int, int]

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r"
_NEWLINE_PATTERN = re.compile(r"\n")
_decoder = JSONDecoder()


@dataclass
class LineIndex:
    """1-based line positions of members in a scanned JSON text.

    Attributes:
        ranges: Inclusive (start, end) lines for members whose value is an
            object or array; start is the line of the member's key. The root
            value is stored under the empty path.
        key_lines: Line of each member's key
        value_spans: Where each scalar member's value literal sits
    """

    ranges: Dict[JSONPath, LineRange] = field(default_factory=dict)
    key_lines: Dict[JSONPath, int] = field(default_factory=dict)
    value_spans: Dict[JSONPath, ValueSpan] = field(default_factory=dict)

    def range_for(self, path: JSONPath) -> Optional[LineRange]:
        return self.ranges.get(tuple(path))

    def line_for(self, path: JSONPath) -> Optional[int]:
        return self.key_lines.get(tuple(path))

    def value_span_for(self, path: JSONPath) -> Optional[ValueSpan]:
        return self.value_spans.get(tuple(path))

    def line_range(self, component_id: str, subcomponent_id: Optional[str] = None) -> Optional[LineRange]:
        """Line range of a component, or of one of its subcomponents."""
        path: JSONPath = (component_id,)
        if subcomponent_id is not None:
            path += (subcomponent_id,)
        return self.range_for(path)

    def line_number(
        self,
        component_id: str,
        key_id: str,
        subcomponent_id: Optional[str] = None,
    ) -> Optional[int]:
        """Line of a key; dotted key ids address flattened nested members."""
        path: JSONPath = (component_id,)
        if subcomponent_id is not None:
            path += (subcomponent_id,)
        return self.line_for(path + tuple(key_id.split(".")))


@dataclass
class ScanResult:
    """Decoded JSON value plus the line index built while decoding it."""

    data: Any
    index: LineIndex


class _Scanner:
    def __init__(self, text: str):
        self.text = text
        self.index = LineIndex()
        self._line_starts: List[int] = [0] + [m.end() for m in _NEWLINE_PATTERN.finditer(text)]

    def line_of(self, pos: int) -> int:
        return bisect.bisect_right(self._line_starts, pos)

    def char(self, pos: int) -> str:
        return self.text[pos] if pos < len(self.text) else ""

    def skip_whitespace(self, pos: int) -> int:
        text = self.text
        end = len(text)
        while pos < end and text[pos] in _WHITESPACE:
            pos += 1
        return pos

    def error(self, message: str, pos: int) -> json.JSONDecodeError:
        return json.JSONDecodeError(message, self.text, pos)

    def value(self, pos: int, path: JSONPath) -> Tuple[Any, int]:
        """Decode the value starting at pos; returns (value, index after value)."""
        ch = self.char(pos)
        if ch == "{":
            return self.object(pos, path)
        if ch == "[":
            return self.array(pos, path)
        if not ch:
            raise self.error("Expecting value", pos)
        # Scalars go through the stdlib decoder; it raises JSONDecodeError itself.
        return _decoder.raw_decode(self.text, pos)

    def member(self, key_pos: int, value_pos: int, path: JSONPath) -> Tuple[Any, int]:
        value, end = self.value(value_pos, path)
        key_line = self.line_of(key_pos)
        self.index.key_lines[path] = key_line
        if self.char(value_pos) in ("{", "["):
            self.index.ranges[path] = (key_line, self.line_of(end - 1))
        else:
            # Scalar literals never contain a raw newline
            value_line = self.line_of(value_pos)
            line_start = self._line_starts[value_line - 1]
            self.index.value_spans[path] = (value_line, value_pos - line_start, end - line_start)
        return value, end

    def object(self, pos: int, path: JSONPath) -> Tuple[Dict[str, Any], int]:
        result: Dict[str, Any] = {}
        pos = self.skip_whitespace(pos + 1)
        if self.char(pos) == "}":
            return result, pos + 1

        while True:
            if self.char(pos) != '"':
                raise self.error("Expecting property name enclosed in double quotes", pos)
            key_pos = pos
            key, pos = scanstring(self.text, pos + 1)
            pos = self.skip_whitespace(pos)
            if self.char(pos) != ":":
                raise self.error("Expecting ':' delimiter", pos)
            value_pos = self.skip_whitespace(pos + 1)
            if key in result:
                # First occurrence wins, in the data and in the index
                logger.warning(
                    "Duplicate member %r ignored (line %d)", ".".join(path + (key,)), self.line_of(key_pos)
                )
                kept, self.index = self.index, LineIndex()
                _, pos = self.member(key_pos, value_pos, path + (key,))
                self.index = kept
            else:
                result[key], pos = self.member(key_pos, value_pos, path + (key,))

            pos = self.skip_whitespace(pos)
            ch = self.char(pos)
            if ch == ",":
                pos = self.skip_whitespace(pos + 1)
            elif ch == "}":
                return result, pos + 1
            else:
                raise self.error("Expecting ',' delimiter", pos)

    def array(self, pos: int, path: JSONPath) -> Tuple[List[Any], int]:
        result: List[Any] = []
        pos = self.skip_whitespace(pos + 1)
        if self.char(pos) == "]":
            return result, pos + 1

        while True:
            item, pos = self.value(pos, path + (f"[{len(result)}]",))
            result.append(item)
            pos = self.skip_whitespace(pos)
            ch = self.char(pos)
            if ch == ",":
                pos = self.skip_whitespace(pos + 1)
            elif ch == "]":
                return result, pos + 1
            else:
                raise self.error("Expecting ',' delimiter", pos)


def scan_json(text: str) -> ScanResult:
    """Decode JSON text and index member line positions.

    Args:
        text: Complete JSON document

    Returns:
        ScanResult with the decoded value (key order preserved; the first of
        duplicate member names wins) and LineIndex

    Raises:
        json.JSONDecodeError: If text is not valid JSON (carries lineno/colno)
    """
    scanner = _Scanner(text)
    start = scanner.skip_whitespace(0)
    data, end = scanner.value(start, ())
    if scanner.char(start) in ("{", "["):
        scanner.index.ranges[()] = (scanner.line_of(start), scanner.line_of(end - 1))

    end = scanner.skip_whitespace(end)
    if end != len(text):
        raise scanner.error("Extra data", end)

    return ScanResult(data=data, index=scanner.index)
