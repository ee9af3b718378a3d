"""Apply global theme to QApplication: load QSS and set default font."""

from pathlib import Path
from typing import TYPE_CHECKING

from . import tokens

if TYPE_CHECKING:
    from PySide6.QtWidgets import QApplication


def apply_theme(app: "QApplication") -> None:
    """Load app_style.qss, set app stylesheet and default font.

    QSS placeholders such as {primary} are substituted from tokens.colors.
    """
    qss_path = Path(__file__).resolve().parent / "app_style.qss"

    if qss_path.exists():
        qss = qss_path.read_text(encoding="utf-8")
        for name, value in tokens.colors.items():
            qss = qss.replace("{" + name + "}", value)
        app.setStyleSheet(qss)

    from PySide6.QtGui import QFont

    family = tokens.typography.get("font_family", "Segoe UI")
    size = tokens.typography.get("font_size_base", 10)
    font = QFont(family, size)
    app.setFont(font)
