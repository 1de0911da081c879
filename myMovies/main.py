import platform
import sys

from PySide6.QtWidgets import QApplication

from myMovies.settings             import APP_NAME, APP_VERSION, DATA_DIR
from myMovies.utils                import log_debug, reset_log
from myMovies.core.store           import MovieStore
from myMovies.gui.theme            import apply_dark_palette
from myMovies.gui.login            import ask_user_for_credentials
from myMovies.gui.main_window      import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    reset_log()
    log_debug(f"Launching {APP_NAME} {APP_VERSION}...")
    log_debug(f"Operating System: {platform.system()} {platform.release()}")
    log_debug(f"Python Version: {platform.python_version()}")
    log_debug(f"Data directory: {DATA_DIR}")

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    apply_dark_palette(app)

    # -------- login; Cancel or too many failures ends the app ---------
    user_name = ask_user_for_credentials()
    if user_name is None:
        log_debug("Shutting down without login.")
        sys.exit(0)

    # -------- one store per session, loaded once ----------------------
    store = MovieStore(user_name)
    store.load()

    window = MainWindow(store)
    window.show()

    # -------- run the event-loop, then persist every edit -------------
    status = app.exec()
    store.shutdown()
    log_debug(f"Exiting with status {status}.")
    sys.exit(status)

# Python entry-point guard
if __name__ == "__main__":
    main()
