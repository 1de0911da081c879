from __future__ import annotations
from typing import Optional

from PySide6.QtCore    import Qt, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QDialog, QDialogButtonBox, QFormLayout, QLabel, QLineEdit, QVBoxLayout, QWidget
)

from myMovies.settings             import APP_NAME
from myMovies.utils                import log_debug, log_error
from myMovies.gui.controller       import LoginAttempts
from myMovies.gui.window_center    import center_when_shown


class LoginDialog(QDialog):
    """
    First screen of the app: asks for a user name and password.

    No real authentication happens (see ``controller.is_valid_login``).
    After MAX_LOGIN_ATTEMPTS failures (``controller.LoginAttempts``) the dialog is rejected.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"{APP_NAME} - Login")
        self.setModal(True)
        self.attempts = LoginAttempts()
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.user_input = QLineEdit()
        self.password_input = QLineEdit()
        self.password_input.setEchoMode(QLineEdit.Password)
        form.addRow("User Name", self.user_input)
        form.addRow("Password", self.password_input)
        layout.addLayout(form)

        self.status = QLabel("", alignment=Qt.AlignCenter)
        layout.addWidget(self.status)

        bb = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        bb.button(QDialogButtonBox.Ok).setText("Login")
        bb.accepted.connect(self._on_login)
        bb.rejected.connect(self.reject)
        layout.addWidget(bb)

    def user_name(self) -> str:
        return self.user_input.text().strip()

    @Slot()
    def _on_login(self) -> None:
        if self.attempts.check(self.user_name(), self.password_input.text()):
            self.accept()
            return
        if not self.attempts.exhausted:
            self.status.setText("Please try again.")
            self.password_input.clear()
            self.user_input.setFocus()
        else:
            log_error("User credentials not valid for more than the max number of tries.")
            self.reject()


def ask_user_for_credentials(parent: QWidget | None = None) -> Optional[str]:
    """Show the login screen; return the user name, or None to quit."""
    dlg = LoginDialog(parent)
    center_when_shown(dlg)
    if dlg.exec():
        log_debug(f"User {dlg.user_name()!r} logged in.")
        return dlg.user_name()
    return None
