"""Preview panel: a mock element painted with the selected node's resolved colors."""

from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from ...models.preview_mode import PreviewMode
from ...models.style_key import StyleKey, StyleType
from ..theme import tokens
from .style_key_row import ColorSwatch, readable_text_color

Resolver = Callable[[str], Optional[str]]


def _first_value(keys: List[StyleKey], name: str) -> Optional[str]:
    return next((k.value for k in keys if k.id == name), None)


class PreviewPanel(QFrame):
    """Renders a sample card plus a swatch per color key."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("previewPanel")

        layout = QVBoxLayout(self)
        header = QHBoxLayout()
        title = QLabel("Preview")
        title.setStyleSheet("font-weight: bold; font-size: 14px;")
        header.addWidget(title)
        header.addStretch()
        self.mode_label = QLabel()
        self.mode_label.setProperty("class", "muted")
        header.addWidget(self.mode_label)
        layout.addLayout(header)

        self.canvas = QFrame()
        canvas_layout = QVBoxLayout(self.canvas)
        canvas_layout.setContentsMargins(24, 24, 24, 24)
        self.sample = QLabel()
        self.sample.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.sample.setMinimumHeight(72)
        self.sample.setWordWrap(True)
        canvas_layout.addWidget(self.sample)
        layout.addWidget(self.canvas)

        self.swatches = QWidget()
        self.swatch_grid = QGridLayout(self.swatches)
        self.swatch_grid.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.swatches)
        layout.addStretch()

    def clear(self) -> None:
        self.sample.setText("Select a component to preview")
        self.sample.setStyleSheet("")
        self._clear_swatches()

    def _clear_swatches(self) -> None:
        while self.swatch_grid.count():
            item = self.swatch_grid.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

    def render(self, title: str, keys: List[StyleKey], resolver: Resolver, mode: PreviewMode) -> None:
        """Repaint the preview for a node's keys."""
        self.mode_label.setText(f"{mode.value} Mode")
        outer = tokens.colors["preview_light"] if mode is PreviewMode.LIGHT else tokens.colors["preview_dark"]
        self.canvas.setStyleSheet(f"background-color: {outer}; border-radius: 12px;")

        background = self._resolve(keys, "background_color", resolver)
        text = self._resolve(keys, "text_color", resolver) or readable_text_color(background or outer)
        border = self._resolve(keys, "border_color", resolver)
        radius = _first_value(keys, "border_radius") or "8px"
        if radius.isdigit():
            radius += "px"

        css = [f"color: {text};", f"border-radius: {radius};", "padding: 12px;"]
        if background:
            css.append(f"background-color: {background};")
        css.append(f"border: 1px solid {border};" if border else "border: none;")
        self.sample.setStyleSheet(" ".join(css))
        self.sample.setText(f"{title}\nThe quick brown fox jumps over the lazy dog")

        self._clear_swatches()
        color_keys = [k for k in keys if k.type is StyleType.COLOR]
        for row, key in enumerate(color_keys):
            swatch = ColorSwatch()
            resolved = resolver(key.value)
            swatch.set_color(resolved)
            self.swatch_grid.addWidget(swatch, row, 0)
            self.swatch_grid.addWidget(QLabel(key.label), row, 1)
            value = QLabel(resolved or f"{key.value} (unresolved)")
            value.setProperty("class", "muted")
            self.swatch_grid.addWidget(value, row, 2)

    @staticmethod
    def _resolve(keys: List[StyleKey], name: str, resolver: Resolver) -> Optional[str]:
        value = _first_value(keys, name)
        return resolver(value) if value else None
