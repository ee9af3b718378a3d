"""Main window for the Style Editor UI."""

from typing import Dict, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QSplitter, QToolBar,
    QStackedWidget, QTreeWidget, QTreeWidgetItem, QScrollArea, QMessageBox,
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence

from ...config import get_app_name
from ...editor_state import EditorState
from ...models.style_key import InvalidValueError
from .about_dialog import AboutDialog
from .preview_panel import PreviewPanel
from .snippet_output import SnippetOutput
from .style_key_row import StyleKeyRow


NODE_ROLE = Qt.ItemDataRole.UserRole


class MainWindow(QMainWindow):
    """Sidebar | editor rows | preview and snippet output."""

    def __init__(self, state: EditorState):
        super().__init__()
        self.state = state
        self.setWindowTitle(get_app_name())
        self.resize(1200, 800)

        self._rows: Dict[str, StyleKeyRow] = {}

        self.setup_menu_bar()
        self.setup_ui()
        self.populate_sidebar()

    def setup_menu_bar(self):
        """Setup menu bar with edit and help menus."""
        menubar = self.menuBar()

        edit_menu = menubar.addMenu("Edit")
        reset_action = edit_menu.addAction("Reset to Original")
        reset_action.triggered.connect(self.confirm_reset)

        help_menu = menubar.addMenu("Help")
        about_action = help_menu.addAction(f"About {get_app_name()}...")
        about_action.triggered.connect(self.open_about)

    def setup_ui(self):
        """Initialize UI: toolbar, sidebar, stacked empty/editor view, output panels, status bar."""
        toolbar = QToolBar()
        toolbar.setObjectName("main_toolbar")
        self.addToolBar(toolbar)

        self.reset_action = QAction("Reset", self)
        self.reset_action.setShortcut(QKeySequence("Ctrl+Shift+R"))
        self.reset_action.triggered.connect(self.confirm_reset)
        toolbar.addAction(self.reset_action)

        self.mode_action = QAction("Dark Preview", self)
        self.mode_action.setShortcut(QKeySequence("Ctrl+D"))
        self.mode_action.triggered.connect(self.toggle_preview_mode)
        toolbar.addAction(self.mode_action)

        copy_action = QAction("Copy Snippet", self)
        copy_action.setShortcut(QKeySequence("Ctrl+Shift+C"))
        toolbar.addAction(copy_action)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        self.setCentralWidget(splitter)

        # --- Sidebar: components with their subcomponents ---
        self.sidebar = QTreeWidget()
        self.sidebar.setObjectName("sidebar")
        self.sidebar.setHeaderHidden(True)
        self.sidebar.itemSelectionChanged.connect(self._on_sidebar_selection)
        splitter.addWidget(self.sidebar)

        # --- Editor: empty state | scrollable key rows ---
        self.stacked = QStackedWidget()
        empty_label = QLabel("Select a component to edit")
        empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        empty_label.setProperty("class", "muted")
        self.stacked.addWidget(empty_label)

        editor_page = QWidget()
        editor_layout = QVBoxLayout(editor_page)
        self.node_title = QLabel()
        self.node_title.setStyleSheet("font-size: 16px; font-weight: bold;")
        editor_layout.addWidget(self.node_title)
        self.node_comment = QLabel()
        self.node_comment.setProperty("class", "muted")
        self.node_comment.setWordWrap(True)
        editor_layout.addWidget(self.node_comment)

        self.rows_container = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_container)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.addStretch()
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setWidget(self.rows_container)
        editor_layout.addWidget(scroll)
        self.stacked.addWidget(editor_page)
        splitter.addWidget(self.stacked)

        # --- Detail: preview above snippet output ---
        detail = QSplitter(Qt.Orientation.Vertical)
        self.preview = PreviewPanel()
        self.preview.clear()
        detail.addWidget(self.preview)
        self.snippet_output = SnippetOutput()
        self.snippet_output.copied.connect(self._update_status_bar)
        copy_action.triggered.connect(self.snippet_output.copy_snippet)
        detail.addWidget(self.snippet_output)
        splitter.addWidget(detail)

        splitter.setSizes([220, 520, 460])
        self.stacked.setCurrentIndex(0)
        self._update_status_bar()

    def populate_sidebar(self) -> None:
        """Rebuild the component tree from the live document."""
        self.sidebar.blockSignals(True)
        self.sidebar.clear()
        for component in self.state.document.components:
            item = QTreeWidgetItem([component.label])
            item.setData(0, NODE_ROLE, (component.id, None))
            if component.comment:
                item.setToolTip(0, component.comment)
            for subcomponent in component.subcomponents:
                child = QTreeWidgetItem([subcomponent.label])
                child.setData(0, NODE_ROLE, (component.id, subcomponent.id))
                item.addChild(child)
            self.sidebar.addTopLevelItem(item)
        self.sidebar.expandAll()
        self.sidebar.blockSignals(False)

    def _on_sidebar_selection(self) -> None:
        items = self.sidebar.selectedItems()
        if not items:
            return
        component_id, subcomponent_id = items[0].data(0, NODE_ROLE)
        self.state.select_component(component_id)
        if subcomponent_id is not None:
            self.state.select_subcomponent(subcomponent_id)
        self.show_selected_node()

    def show_selected_node(self) -> None:
        """Rebuild editor rows for the selected node and refresh output panels."""
        self._clear_rows()
        node = self.state.selected_node
        if node is None:
            self.stacked.setCurrentIndex(0)
            self.preview.clear()
            self.snippet_output.set_content("", "")
            return

        component = self.state.selected_component
        self.node_title.setText(
            node.label if node is component else f"{component.label} / {node.label}"
        )
        self.node_comment.setText(node.comment or "")
        self.node_comment.setVisible(bool(node.comment))

        changed = self.state.selected_changed_keys
        for key in node.keys:
            row = StyleKeyRow(key, self.state.resolve_value, changed=key.id in changed)
            row.value_edited.connect(self._on_value_edited)
            self.rows_layout.insertWidget(self.rows_layout.count() - 1, row)
            self._rows[key.id] = row
        if not node.keys:
            empty = QLabel("No editable values in this group")
            empty.setProperty("class", "muted")
            self.rows_layout.insertWidget(0, empty)

        self.stacked.setCurrentIndex(1)
        self._refresh_outputs()

    def _clear_rows(self) -> None:
        self._rows.clear()
        while self.rows_layout.count() > 1:
            item = self.rows_layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

    def _on_value_edited(self, key_id: str, value: str) -> None:
        row = self._rows.get(key_id)
        try:
            updated = self.state.update_typed_value(key_id, value)
        except InvalidValueError as e:
            if row is not None:
                row.set_invalid(True)
            self._update_status_bar(str(e))
            return
        if row is not None:
            row.set_invalid(False)
        if not updated:
            return
        if row is not None:
            row.set_changed(True)
        self._refresh_outputs()

    def _refresh_outputs(self) -> None:
        node = self.state.selected_node
        if node is not None:
            self.preview.render(node.label, node.keys, self.state.resolve_value, self.state.preview_mode)
        self.snippet_output.set_content(self.state.current_snippet, self.state.changed_tokens_summary())
        self._update_status_bar()

    def _update_status_bar(self, message: Optional[str] = None) -> None:
        count = len(self.state.changed_keys)
        parts = [f"{count} changed value{'s' if count != 1 else ''}"]
        if message:
            parts.append(message)
        self.statusBar().showMessage("  |  ".join(parts))

    def confirm_reset(self) -> None:
        """Ask before discarding edits, then restore the original values."""
        if not self.state.changed_keys:
            return
        answer = QMessageBox.question(
            self,
            "Reset to Original",
            "Discard all edits and restore the values from the file?",
        )
        if answer != QMessageBox.StandardButton.Yes:
            return
        self.state.reset_to_original()
        self.show_selected_node()

    def toggle_preview_mode(self) -> None:
        mode = self.state.toggle_preview_mode()
        self.mode_action.setText("Dark Preview" if mode.value == "Light" else "Light Preview")
        self._refresh_outputs()

    def open_about(self):
        """Open About dialog."""
        dialog = AboutDialog(self)
        dialog.exec()
