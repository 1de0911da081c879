from __future__ import annotations
from typing import Optional

from PySide6.QtCore    import Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QDialog, QDialogButtonBox, QFormLayout, QLineEdit, QMessageBox, QVBoxLayout, QWidget
)

from myMovies.core.models       import Movie
from myMovies.core.store        import MovieStore
from myMovies.errors            import InvalidInputError, NotFoundError
from myMovies.utils             import format_field
from myMovies.gui.controller    import Edit, save_movie
from myMovies.gui.window_center import center_when_shown


class MovieDialog(QDialog):
    """
    Add a new movie, or change the selected one.

    Bad input keeps the dialog open and lists every problem found.
    """
    def __init__(
        self,
        store: MovieStore,
        edit: Edit,
        movie: Optional[Movie] = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        if edit is Edit.CHANGE and movie is None:
            raise ValueError("Change needs the selected movie")
        self.store = store
        self.edit = edit
        self.movie = movie
        self.saved_id: Optional[str] = None
        self.setWindowTitle(f"{edit} Movie")
        self.setModal(True)
        self._setup_ui()
        center_when_shown(self)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.title_input   = QLineEdit()
        self.date_input    = QLineEdit()
        self.date_input.setPlaceholderText("YYYY-MM-DD")
        self.rating_input  = QLineEdit()
        self.rating_input.setPlaceholderText("0.0 - 10.0")
        self.comment_input = QLineEdit()
        form.addRow("Title",       self.title_input)
        form.addRow("Date Viewed", self.date_input)
        form.addRow("Rating",      self.rating_input)
        form.addRow("Comment",     self.comment_input)
        layout.addLayout(form)

        if self.movie is not None:
            self.title_input.setText(format_field(self.movie.title))
            self.date_input.setText(format_field(self.movie.date_viewed))
            self.rating_input.setText(format_field(self.movie.rating))
            self.comment_input.setText(format_field(self.movie.comment))

        bb = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        bb.button(QDialogButtonBox.Ok).setText(str(self.edit))
        bb.accepted.connect(self._on_save)
        bb.rejected.connect(self.reject)
        layout.addWidget(bb)
        self.setMinimumWidth(360)

    @Slot()
    def _on_save(self) -> None:
        try:
            self.saved_id = save_movie(
                self.store,
                self.edit,
                self.title_input.text(),
                self.date_input.text(),
                self.rating_input.text(),
                self.comment_input.text(),
                movie_id=self.movie.id if self.movie is not None else None,
            )
        except InvalidInputError as e:
            QMessageBox.warning(self, "Movie cannot be saved", "\n".join(e.messages))
            return
        except NotFoundError as e:
            QMessageBox.warning(self, "Movie cannot be saved", str(e))
            return
        self.accept()
