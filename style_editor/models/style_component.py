"""Component and subcomponent data models (the editable style tree)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .style_key import StyleKey


@dataclass
class StyleSubcomponent:
    """A named nested grouping of keys within a component (e.g. an icon or header).

    Attributes:
        id: Key of the nested object in the component
        label: Display name
        keys: Ordered keys (deeper nesting is flattened into dotted ids)
        comment: Optional help text
        start_line_number: First line of the object in the source text
        end_line_number: Last line (closing brace) of the object
    """

    id: str
    label: str
    keys: List[StyleKey] = field(default_factory=list)
    comment: Optional[str] = None
    start_line_number: Optional[int] = None
    end_line_number: Optional[int] = None

    def __post_init__(self):
        """Validate line range ordering."""
        _check_range(self.id, self.start_line_number, self.end_line_number)

    def find_key(self, key_id: str) -> Optional[StyleKey]:
        return next((k for k in self.keys if k.id == key_id), None)


@dataclass
class StyleComponent:
    """A top-level named style group (e.g. "chat", "nav").

    Attributes:
        id: Top-level key, unique across the document
        label: Display name
        keys: Direct keys (not owned by a subcomponent)
        subcomponents: Ordered subcomponents
        comment: Optional help text
        start_line_number: First line of the component in the source text
        end_line_number: Last line of the component
    """

    id: str
    label: str
    keys: List[StyleKey] = field(default_factory=list)
    subcomponents: List[StyleSubcomponent] = field(default_factory=list)
    comment: Optional[str] = None
    start_line_number: Optional[int] = None
    end_line_number: Optional[int] = None

    def __post_init__(self):
        """Validate line range ordering."""
        _check_range(self.id, self.start_line_number, self.end_line_number)

    def find_key(self, key_id: str) -> Optional[StyleKey]:
        return next((k for k in self.keys if k.id == key_id), None)

    def find_subcomponent(self, subcomponent_id: str) -> Optional[StyleSubcomponent]:
        return next((s for s in self.subcomponents if s.id == subcomponent_id), None)


def _check_range(node_id: str, start: Optional[int], end: Optional[int]) -> None:
    if start is not None and end is not None and start > end:
        raise ValueError(
            f"Invalid line range for {node_id!r}: "
            f"start={start} is after end={end}"
        )
