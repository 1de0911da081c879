"""
gui
~~~
All Qt widgets and controllers.

•  No file access here – everything goes through `core.MovieStore`.
•  Only the Qt-free controller is re-exported, so importing this package
   does not pull in Qt. Widgets come from their own modules:

    from myMovies.gui.main_window import MainWindow
"""

from myMovies.gui.controller import (
    COLUMNS,
    ColumnSorter,
    Edit,
    LoginAttempts,
    delete_movie,
    is_valid_login,
    save_movie,
)

__all__ = [
    "COLUMNS", "ColumnSorter", "Edit", "LoginAttempts",
    "delete_movie", "is_valid_login", "save_movie",
]
