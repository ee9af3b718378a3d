"""About dialog with tabs: About and Help."""

from PySide6.QtWidgets import (
    QDialog, QTabWidget, QWidget, QVBoxLayout, QLabel, QPushButton,
)
from PySide6.QtCore import Qt

from ...config import get_app_version, get_app_name, get_source_document_path, get_token_palette_path


class AboutDialog(QDialog):
    """Dialog with tabs 'About' (name, version, data files) and 'Help' (usage)."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("aboutDialog")
        self.setWindowTitle(f"About {get_app_name()}")
        self.setMinimumSize(420, 340)
        self.setModal(True)

        layout = QVBoxLayout(self)

        tabs = QTabWidget()
        tabs.addTab(self._build_about_tab(), "About")
        tabs.addTab(self._build_help_tab(), "Help")
        layout.addWidget(tabs)

        close_btn = QPushButton("Close")
        close_btn.setDefault(True)
        close_btn.clicked.connect(self.accept)
        layout.addWidget(close_btn, alignment=Qt.AlignmentFlag.AlignRight)

    def _build_about_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout(tab)
        layout.setSpacing(12)

        name = QLabel(get_app_name())
        name.setStyleSheet("font-size: 14pt; font-weight: bold;")
        layout.addWidget(name)

        version = QLabel(f"Version {get_app_version()}")
        version.setProperty("class", "muted")
        layout.addWidget(version)

        desc = QLabel(
            "Browse the interface style document, edit colors, fonts, sizes and flags, "
            "preview the result and copy a snippet of your changes back into the source file."
        )
        desc.setWordWrap(True)
        layout.addWidget(desc)

        files = QLabel(
            f"Style document: {get_source_document_path()}\n"
            f"Token palette: {get_token_palette_path()}"
        )
        files.setWordWrap(True)
        files.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        files.setProperty("class", "muted")
        layout.addWidget(files)
        layout.addStretch()
        return tab

    def _build_help_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout(tab)
        text = QLabel(
            "1. Pick a component (or one of its nested groups) in the sidebar.\n"
            "2. Edit values: colors accept a hex value or a semantic token path "
            "such as colors.background.base.level000.\n"
            "3. The JSON output shows the original lines of the selection with your edits.\n"
            "4. Copy Snippet copies that text; Copy Changes copies only the edited values.\n"
            "5. Reset restores every value from the file.\n\n"
            "Set STYLE_EDITOR_SOURCE / STYLE_EDITOR_PALETTE to edit other files."
        )
        text.setWordWrap(True)
        layout.addWidget(text)
        layout.addStretch()
        return tab
