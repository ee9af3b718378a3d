"""Snippet output panel with copy-to-clipboard actions."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..theme import tokens


class SnippetOutput(QWidget):
    """Read-only monospaced view of the current snippet."""

    # Emitted with a short status message after a copy
    copied = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._summary = ""

        layout = QVBoxLayout(self)
        title = QLabel("JSON Output:")
        title.setStyleSheet("font-weight: bold;")
        layout.addWidget(title)

        self.text = QPlainTextEdit()
        self.text.setObjectName("snippetOutput")
        self.text.setReadOnly(True)
        self.text.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.text.setFont(QFont(tokens.typography["font_family_mono"], tokens.typography["font_size_base"]))
        layout.addWidget(self.text)

        buttons = QHBoxLayout()
        self.copy_snippet_btn = QPushButton("Copy Snippet")
        self.copy_snippet_btn.setObjectName("primaryButton")
        self.copy_snippet_btn.clicked.connect(self.copy_snippet)
        buttons.addWidget(self.copy_snippet_btn)
        self.copy_changes_btn = QPushButton("Copy Changes")
        self.copy_changes_btn.clicked.connect(self.copy_changes)
        buttons.addWidget(self.copy_changes_btn)
        buttons.addStretch()
        layout.addLayout(buttons)

    def set_content(self, snippet: str, summary: str) -> None:
        self.text.setPlainText(snippet)
        self._summary = summary
        self.copy_snippet_btn.setEnabled(bool(snippet))

    def copy_snippet(self) -> None:
        QGuiApplication.clipboard().setText(self.text.toPlainText())
        self.copied.emit("Snippet copied to clipboard")

    def copy_changes(self) -> None:
        QGuiApplication.clipboard().setText(self._summary)
        self.copied.emit("Changed tokens copied to clipboard")
