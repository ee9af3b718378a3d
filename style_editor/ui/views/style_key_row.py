"""Editor row for a single style key, with a type-specific value control."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QCheckBox,
    QColorDialog,
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from ...models.style_key import StyleKey, StyleType
from ...pipeline.color_normalizer import format_hex_color, parse_hex_color, relative_luminance
from ..theme import tokens

logger = logging.getLogger(__name__)

NUMBER_MINIMUM = 0
NUMBER_MAXIMUM = 1000
SWATCH_SIZE = 28

# (name, value, description) presets offered for border radius keys
BORDER_RADIUS_PRESETS = [
    ("none", "0px", "No border radius"),
    ("xs", "2px", "Extra small radius"),
    ("sm", "4px", "Small radius"),
    ("md", "6px", "Medium radius"),
    ("lg", "8px", "Large radius"),
    ("xl", "12px", "Extra large radius"),
    ("2xl", "16px", "2X large radius"),
    ("3xl", "24px", "3X large radius"),
    ("full", "9999px", "Fully rounded"),
]

Resolver = Callable[[str], Optional[str]]


class ColorSwatch(QLabel):
    """Small square showing a resolved hex color (grey hatch when unresolved)."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setFixedSize(SWATCH_SIZE, SWATCH_SIZE)
        self.set_color(None)

    def set_color(self, hex_value: Optional[str]) -> None:
        try:
            red, green, blue, _ = parse_hex_color(hex_value) if hex_value else (0, 0, 0, 0)
        except ValueError:
            hex_value = None
        if not hex_value:
            self.setStyleSheet(
                f"background: transparent; border: 1px dashed {tokens.colors['border']}; border-radius: 6px;"
            )
            self.setToolTip("Unresolved value")
            return
        fill = format_hex_color(red, green, blue)
        self.setStyleSheet(
            f"background-color: {fill}; border: 1px solid {tokens.colors['border']}; border-radius: 6px;"
        )
        self.setToolTip(fill)


class TypeBadge(QLabel):
    """Pill showing the key's StyleType."""

    def __init__(self, style_type: StyleType, parent: Optional[QWidget] = None) -> None:
        super().__init__(style_type.value.capitalize(), parent)
        fill = tokens.type_badge_colors.get(style_type.value, tokens.colors["text_muted"])
        self.setStyleSheet(
            f"background-color: {fill}; color: #FFFFFF; border-radius: 8px; "
            "padding: 2px 8px; font-size: 10px; font-weight: bold;"
        )


class StyleKeyRow(QFrame):
    """Label, help text, type badge and value editor for one StyleKey.

    Emits value_edited(key_id, new_value) on user edits; the row never
    mutates the key itself.
    """

    value_edited = Signal(str, str)

    def __init__(
        self,
        key: StyleKey,
        resolver: Resolver,
        changed: bool = False,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("styleKeyRow")
        self.key = key
        self._resolver = resolver
        self._swatch: Optional[ColorSwatch] = None
        self._resolved_label: Optional[QLabel] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(tokens.spacing["md"])

        header = QHBoxLayout()
        text_column = QVBoxLayout()
        text_column.setSpacing(tokens.spacing["xs"])
        label = QLabel(key.label)
        label.setObjectName("styleKeyLabel")
        text_column.addWidget(label)
        if key.comment:
            comment = QLabel(key.comment)
            comment.setObjectName("styleKeyComment")
            comment.setWordWrap(True)
            text_column.addWidget(comment)
        header.addLayout(text_column)
        header.addStretch()
        header.addWidget(TypeBadge(key.type))
        layout.addLayout(header)

        layout.addWidget(self._build_editor())
        self.set_changed(changed)

    def set_changed(self, changed: bool) -> None:
        self._set_flag("changed", changed)

    def set_invalid(self, invalid: bool) -> None:
        """Flag a rejected edit; the stored value keeps its last valid text."""
        self._set_flag("invalid", invalid)

    def _set_flag(self, name: str, on: bool) -> None:
        self.setProperty(name, "true" if on else "false")
        # Dynamic properties only restyle after a repolish
        self.style().unpolish(self)
        self.style().polish(self)

    def _emit(self, value: str) -> None:
        self.key_value_preview(value)
        self.value_edited.emit(self.key.id, value)

    def key_value_preview(self, value: str) -> None:
        """Refresh the swatch and resolved-value caption for a color value."""
        if self._swatch is None:
            return
        resolved = self._resolver(value)
        self._swatch.set_color(resolved)
        if self._resolved_label is not None:
            if value.startswith("#") or resolved is None:
                self._resolved_label.setText("" if resolved else "Unresolved token")
            else:
                self._resolved_label.setText(f"→ {resolved}")

    # --- Editors ---------------------------------------------------------

    def _build_editor(self) -> QWidget:
        # border_radius is classified as color by name; offer presets instead
        if "border_radius" in self.key.name.lower() and not self.key.value.startswith("#"):
            return self._border_radius_editor()
        if self.key.type is StyleType.COLOR:
            return self._color_editor()
        if self.key.type is StyleType.BOOL:
            return self._bool_editor()
        if self.key.type is StyleType.NUMBER:
            return self._number_editor()
        return self._text_editor("Font value" if self.key.type is StyleType.FONT else "String value")

    def _text_editor(self, placeholder: str) -> QWidget:
        edit = QLineEdit(self.key.value)
        edit.setPlaceholderText(placeholder)
        edit.textEdited.connect(self._emit)
        return edit

    def _color_editor(self) -> QWidget:
        container = QWidget()
        row = QHBoxLayout(container)
        row.setContentsMargins(0, 0, 0, 0)

        self._swatch = ColorSwatch()
        row.addWidget(self._swatch)

        self._color_edit = QLineEdit(self.key.value)
        self._color_edit.setPlaceholderText("Enter hex color or token path")
        self._color_edit.textEdited.connect(self._emit)
        row.addWidget(self._color_edit, stretch=1)

        pick = QPushButton("Pick…")
        pick.clicked.connect(self._pick_color)
        row.addWidget(pick)

        self._resolved_label = QLabel()
        self._resolved_label.setProperty("class", "muted")
        row.addWidget(self._resolved_label)

        self.key_value_preview(self.key.value)
        return container

    def _pick_color(self) -> None:
        current = self._resolver(self._color_edit.text()) or "#808080"
        try:
            red, green, blue, _ = parse_hex_color(current)
        except ValueError:
            red, green, blue = 128, 128, 128
        color = QColorDialog.getColor(QColor(red, green, blue), self, f"Choose {self.key.label}")
        if not color.isValid():
            return
        hex_value = format_hex_color(color.red(), color.green(), color.blue())
        logger.debug("Color picker selected %s for %s", hex_value, self.key.id)
        self._color_edit.setText(hex_value)
        self._emit(hex_value)

    def _bool_editor(self) -> QWidget:
        checkbox = QCheckBox()
        checked = self.key.value == "true"
        checkbox.setChecked(checked)
        checkbox.setText("Enabled" if checked else "Disabled")

        def _toggled(state: bool) -> None:
            checkbox.setText("Enabled" if state else "Disabled")
            self._emit("true" if state else "false")

        checkbox.toggled.connect(_toggled)
        return checkbox

    def _number_editor(self) -> QWidget:
        container = QWidget()
        row = QHBoxLayout(container)
        row.setContentsMargins(0, 0, 0, 0)

        edit = QLineEdit(self.key.value)
        edit.setPlaceholderText("Number value")
        row.addWidget(edit, stretch=1)

        stepper = QSpinBox()
        stepper.setRange(NUMBER_MINIMUM, NUMBER_MAXIMUM)
        value = self.key.typed_value
        stepper.setValue(int(value) if isinstance(value, (int, float)) else 0)
        stepper.setButtonSymbols(QSpinBox.ButtonSymbols.UpDownArrows)
        row.addWidget(stepper)

        def _stepped(number: int) -> None:
            edit.setText(str(number))
            self._emit(str(number))

        def _typed(text: str) -> None:
            try:
                number = int(text)
            except ValueError:
                number = None
            if number is not None and NUMBER_MINIMUM <= number <= NUMBER_MAXIMUM:
                stepper.blockSignals(True)
                stepper.setValue(number)
                stepper.blockSignals(False)
            self._emit(text)

        stepper.valueChanged.connect(_stepped)
        edit.textEdited.connect(_typed)
        return container

    def _border_radius_editor(self) -> QWidget:
        combo = QComboBox()
        combo.setEditable(True)
        for name, value, description in BORDER_RADIUS_PRESETS:
            combo.addItem(f"{name} ({value})", value)
            combo.setItemData(combo.count() - 1, description, Qt.ItemDataRole.ToolTipRole)
        combo.setEditText(self.key.value)

        def _activated(index: int) -> None:
            value = combo.itemData(index)
            combo.setEditText(value)
            self._emit(value)

        combo.activated.connect(_activated)
        combo.lineEdit().textEdited.connect(self._emit)
        return combo


def readable_text_color(background_hex: Optional[str]) -> str:
    """Black or white, whichever reads better on the given background."""
    if not background_hex:
        return tokens.colors["text"]
    try:
        return "#000000" if relative_luminance(background_hex) > 0.4 else "#FFFFFF"
    except ValueError:
        return tokens.colors["text"]
