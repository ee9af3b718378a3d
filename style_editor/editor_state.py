"""Editor session state: selection, value edits, change tracking and reset.

EditorState is the single object the UI command handlers act on. Selection
is stored by id and re-resolved against the live document on every access,
so nodes replaced by a reset are never held stale.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Set, Tuple, Union

from .models.preview_mode import PreviewMode
from .models.style_component import StyleComponent, StyleSubcomponent
from .models.style_document import StyleDocument
from .models.style_key import StyleKey, TypedValue, encode_value
from .pipeline.snippet_engine import render_changed_tokens_summary, render_snippet
from .pipeline.token_palette import TokenPalette

logger = logging.getLogger(__name__)

# (component id, subcomponent id or None, key id)
EditRef = Tuple[str, Optional[str], str]


class EditorState:
    """Application state for one editing session."""

    def __init__(self, document: StyleDocument, palette: Optional[TokenPalette] = None):
        self.document = document
        self.palette = palette or TokenPalette()
        self.preview_mode = PreviewMode.LIGHT
        self.current_snippet = ""
        self._selected_component_id: Optional[str] = None
        self._selected_subcomponent_id: Optional[str] = None
        self._edits: Set[EditRef] = set()

    # --- Selection -------------------------------------------------------

    @property
    def selected_component(self) -> Optional[StyleComponent]:
        return self.document.find_component(self._selected_component_id)

    @property
    def selected_subcomponent(self) -> Optional[StyleSubcomponent]:
        component = self.selected_component
        if component is None or self._selected_subcomponent_id is None:
            return None
        return component.find_subcomponent(self._selected_subcomponent_id)

    @property
    def selected_node(self) -> Optional[Union[StyleComponent, StyleSubcomponent]]:
        """The node the editor and snippet are scoped to."""
        return self.selected_subcomponent or self.selected_component

    def select_component(self, component_id: str) -> bool:
        """Select a component and clear any subcomponent selection.

        Returns:
            False (and no state change) when no component has this id
        """
        if self.document.find_component(component_id) is None:
            logger.warning("select_component: unknown component %r", component_id)
            return False
        self._selected_component_id = component_id
        self._selected_subcomponent_id = None
        logger.debug("Selected component %s", component_id)
        self.refresh_snippet()
        return True

    def select_subcomponent(self, subcomponent_id: str) -> bool:
        """Select a subcomponent of the currently selected component."""
        component = self.selected_component
        if component is None:
            logger.warning("select_subcomponent(%r) without a selected component", subcomponent_id)
            return False
        if component.find_subcomponent(subcomponent_id) is None:
            logger.warning(
                "select_subcomponent: %r is not part of component %r", subcomponent_id, component.id
            )
            return False
        self._selected_subcomponent_id = subcomponent_id
        logger.debug("Selected subcomponent %s.%s", component.id, subcomponent_id)
        self.refresh_snippet()
        return True

    # --- Edits -----------------------------------------------------------

    @property
    def changed_keys(self) -> Set[str]:
        """Ids of all keys edited since load or the last reset."""
        return {key_id for _, _, key_id in self._edits}

    @property
    def selected_changed_keys(self) -> Set[str]:
        """Ids of edited keys owned by the selected node."""
        component = self.selected_component
        if component is None:
            return set()
        subcomponent = self.selected_subcomponent
        return self._node_edits(component.id, subcomponent.id if subcomponent else None)

    def _scoped_key(self, key_id: str) -> Optional[Tuple[EditRef, StyleKey]]:
        """Find a key in the selected subcomponent, else in the component's direct keys."""
        component = self.selected_component
        if component is None:
            return None
        subcomponent = self.selected_subcomponent
        if subcomponent is not None:
            key = subcomponent.find_key(key_id)
            if key is not None:
                return (component.id, subcomponent.id, key_id), key
        key = component.find_key(key_id)
        if key is not None:
            return (component.id, None, key_id), key
        return None

    def find_key(self, key_id: str) -> Optional[StyleKey]:
        found = self._scoped_key(key_id)
        return found[1] if found else None

    def update_value(self, key_id: str, new_value: str) -> bool:
        """Overwrite a key's value in the current selection scope.

        Returns:
            True if the key was found and updated; unknown keys are a logged no-op
        """
        found = self._scoped_key(key_id)
        if found is None:
            logger.warning("update_value: key %r not found in current selection", key_id)
            return False
        ref, key = found
        key.value = new_value
        self._edits.add(ref)
        logger.info(f"Updated {key_id} to {new_value}")
        self.refresh_snippet()
        return True

    def update_typed_value(self, key_id: str, value: TypedValue) -> bool:
        """Validate a typed value against the key's type, then update it.

        Raises:
            InvalidValueError: If value does not fit the key's StyleType
        """
        key = self.find_key(key_id)
        if key is None:
            logger.warning("update_typed_value: key %r not found in current selection", key_id)
            return False
        return self.update_value(key_id, encode_value(key.type, value))

    def resolve_display_value(self, key_id: str) -> Optional[str]:
        """Literal value to display: hex values verbatim, token paths via the palette."""
        key = self.find_key(key_id)
        if key is None:
            return None
        return self.resolve_value(key.value)

    def resolve_value(self, value: str) -> Optional[str]:
        if value.startswith("#"):
            return value
        return self.palette.resolve(value)

    def reset_to_original(self) -> None:
        """Restore all values from the load-time snapshot and clear change tracking.

        The selection is kept if the same ids still exist after the reset.
        """
        self.document.restore_original()
        self._edits.clear()
        if self.document.find_component(self._selected_component_id) is None:
            self._selected_component_id = None
            self._selected_subcomponent_id = None
        elif self.selected_subcomponent is None:
            self._selected_subcomponent_id = None
        logger.info("Reset document to original values")
        self.refresh_snippet()

    # --- Output ----------------------------------------------------------

    def _node_edits(self, component_id: str, subcomponent_id: Optional[str]) -> Set[str]:
        return {
            key_id
            for comp_id, sub_id, key_id in self._edits
            if comp_id == component_id and sub_id == subcomponent_id
        }

    def refresh_snippet(self) -> str:
        """Recompute the snippet for the selected node."""
        component = self.selected_component
        if component is None:
            self.current_snippet = ""
            return self.current_snippet

        node = self.selected_subcomponent or component
        self.current_snippet = render_snippet(node, self.selected_changed_keys, self.document.source_text)
        return self.current_snippet

    def changed_tokens_summary(self) -> str:
        """JSON summary of the edits made to the selected component and its subcomponents."""
        component = self.selected_component
        if component is None:
            return render_changed_tokens_summary(None, set(), {})

        values: Dict[str, Union[str, Dict[str, str]]] = {}
        changed: Set[str] = set()
        for key_id in self._node_edits(component.id, None):
            key = component.find_key(key_id)
            if key is not None:
                values[key_id] = key.value
                changed.add(key_id)
        for subcomponent in component.subcomponents:
            edited = self._node_edits(component.id, subcomponent.id)
            nested = {k.id: k.value for k in subcomponent.keys if k.id in edited}
            if nested:
                values[subcomponent.id] = nested
                changed.update(nested)
        return render_changed_tokens_summary(component.id, changed, values)

    def toggle_preview_mode(self) -> PreviewMode:
        self.preview_mode = self.preview_mode.toggled()
        return self.preview_mode
