"""
window_center
~~~~~~~~~~~~~
One-shot centring helper for the login screen, dialogs and main window.
Call ``center_when_shown(widget)`` **before** ``show()`` / ``exec()``.

With a parent the widget is centred over the parent, otherwise over the
screen it appears on.
"""

from PySide6.QtCore import QObject, QEvent, QTimer
from PySide6.QtGui  import QGuiApplication
from PySide6.QtWidgets import QWidget


class _CenterOnceFilter(QObject):
    """Internal event-filter: centre after the native window is ready."""
    def __init__(self, widget: QWidget) -> None:
        super().__init__(widget)
        self._widget = widget
        widget.installEventFilter(self)

    # ------------------------------------------------------------------ Qt
    def eventFilter(self, obj, ev):
        if obj is self._widget and ev.type() == QEvent.Type.Show:
            # geometry is final only after the show event is processed
            QTimer.singleShot(0, self._center_and_remove)
        return False

    # ----------------------------------------------------------------- misc
    def _center_and_remove(self) -> None:
        w = self._widget
        parent = w.parentWidget()
        if parent is not None and parent.isVisible():
            target = parent.frameGeometry().center()
        else:
            screen = w.screen() or QGuiApplication.primaryScreen()
            target = screen.availableGeometry().center()
        frame = w.frameGeometry()
        frame.moveCenter(target)
        w.move(frame.topLeft())
        w.removeEventFilter(self)
        self.deleteLater()


def center_when_shown(widget: QWidget) -> None:
    """Centre *widget* the first time it is shown."""
    _CenterOnceFilter(widget)
