"""Document data model: the live component tree plus its load-time snapshot."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import List, Optional

from .style_component import StyleComponent


@dataclass
class StyleDocument:
    """The ordered components of a loaded style document.

    Attributes:
        components: Live, mutable components
        source_text: Original text the components were parsed from
        source_path: Where the text was read from (None for built-in data)
        original_components: Deep copy captured at construction, used for reset
    """

    components: List[StyleComponent]
    source_text: str = ""
    source_path: Optional[str] = None
    original_components: List[StyleComponent] = field(default_factory=list, repr=False)

    def __post_init__(self):
        """Validate component ids and freeze the original snapshot."""
        seen = set()
        for component in self.components:
            if component.id in seen:
                raise ValueError(f"Duplicate component id: {component.id!r}")
            seen.add(component.id)
        self.original_components = copy.deepcopy(self.components)

    def find_component(self, component_id: Optional[str]) -> Optional[StyleComponent]:
        if component_id is None:
            return None
        return next((c for c in self.components if c.id == component_id), None)

    def restore_original(self) -> None:
        """Replace the live components with a fresh copy of the snapshot."""
        self.components = copy.deepcopy(self.original_components)
