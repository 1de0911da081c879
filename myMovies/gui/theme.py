from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from myMovies.settings import ACCENT_COLOR


def apply_dark_palette(app: QApplication) -> None:
    """Apply a dark Fusion palette to the application."""
    palette = QPalette()
    palette.setColor(QPalette.Window,          QColor("#202124"))
    palette.setColor(QPalette.WindowText,      Qt.white)
    palette.setColor(QPalette.Base,            QColor("#2b2c2e"))
    palette.setColor(QPalette.AlternateBase,   QColor("#323336"))
    palette.setColor(QPalette.Button,          QColor("#2d2e30"))
    palette.setColor(QPalette.ButtonText,      Qt.white)
    palette.setColor(QPalette.Text,            Qt.white)
    palette.setColor(QPalette.ToolTipBase,     QColor("#2b2c2e"))
    palette.setColor(QPalette.ToolTipText,     Qt.white)
    palette.setColor(QPalette.Highlight,       QColor(ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    palette.setColor(QPalette.Disabled, QPalette.Text,       QColor("#7f7f7f"))
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, QColor("#7f7f7f"))
    app.setStyle("Fusion")
    app.setPalette(palette)
