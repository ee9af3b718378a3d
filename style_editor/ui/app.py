"""UI Entry point."""
import logging
import sys

from PySide6.QtWidgets import QApplication

from ..config import get_app_name, get_log_level, get_profile_name, get_source_document_path, get_token_palette_path
from ..config.profile_manager import set_profile
from ..editor_state import EditorState
from ..pipeline.reader import load_style_document, load_token_palette
from .theme.apply_theme import apply_theme
from .views.main_window import MainWindow

logger = logging.getLogger(__name__)


def load_editor_state() -> EditorState:
    """Load profile, style document and token palette (falling back to built-ins)."""
    profile_name = get_profile_name()
    try:
        profile = set_profile(profile_name)
    except (FileNotFoundError, ValueError) as e:
        logger.warning("Could not load profile %r, using built-in rules: %s", profile_name, e)
        profile = None

    document = load_style_document(get_source_document_path(), profile)
    palette = load_token_palette(get_token_palette_path())
    return EditorState(document, palette)


def main():
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    app.setApplicationName(get_app_name())
    apply_theme(app)
    window = MainWindow(load_editor_state())
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
