# gui/main_window.py
from __future__ import annotations
from typing import List, Optional

from PySide6.QtCore    import Qt, Slot
from PySide6.QtGui     import QAction, QKeySequence
from PySide6.QtWidgets import (
    QAbstractItemView, QHeaderView, QMainWindow, QMessageBox,
    QStyle, QTableWidget, QTableWidgetItem
)

from myMovies.settings           import APP_NAME, APP_VERSION
from myMovies.utils              import format_field, log_debug
from myMovies.core.models        import Movie
from myMovies.core.store         import MovieStore
from myMovies.gui.controller     import COLUMNS, ColumnSorter, Edit, delete_movie
from myMovies.gui.movie_dialog   import MovieDialog
from myMovies.gui.window_center  import center_when_shown


class MainWindow(QMainWindow):
    """Menu bar plus a sortable table holding the user's movie list."""

    def __init__(self, store: MovieStore):
        super().__init__()
        self.store  = store
        self.sorter = ColumnSorter()
        self._movies: List[Movie] = []
        self.setWindowTitle(f"{APP_NAME} - {store.user_name}")
        self.resize(760, 480)

        # ── table ───────────────────────────────────────────────────────
        self.table = QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels(list(COLUMNS))
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setSectionsClickable(True)
        header.setSectionResizeMode(0, QHeaderView.Stretch)
        header.setSectionResizeMode(3, QHeaderView.Stretch)
        header.sectionClicked.connect(self._on_sort)
        self.table.itemSelectionChanged.connect(self._update_actions)
        self.table.doubleClicked.connect(lambda _idx: self._on_change())
        self.setCentralWidget(self.table)

        self._build_actions_and_menu()
        self.refresh_view()
        center_when_shown(self)

    # ───────────────────────────────────────────────────────────────────
    def _build_actions_and_menu(self) -> None:
        style = self.style()

        self.act_add = QAction(style.standardIcon(QStyle.SP_FileIcon), "Add...", self)
        self.act_add.setShortcut(QKeySequence.New)
        self.act_add.setStatusTip("Add a new movie")
        self.act_add.triggered.connect(self._on_add)

        self.act_change = QAction(style.standardIcon(QStyle.SP_FileDialogDetailedView), "Change...", self)
        self.act_change.setShortcut("Ctrl+E")
        self.act_change.setStatusTip("Change the selected movie")
        self.act_change.triggered.connect(self._on_change)

        self.act_delete = QAction(style.standardIcon(QStyle.SP_TrashIcon), "Delete", self)
        self.act_delete.setShortcut(QKeySequence.Delete)
        self.act_delete.setStatusTip("Delete the selected movie")
        self.act_delete.triggered.connect(self._on_delete)

        act_exit = QAction("Exit", self)
        act_exit.setShortcut(QKeySequence.Quit)
        act_exit.triggered.connect(self.close)

        act_about = QAction("About", self)
        act_about.setStatusTip("About the application")
        act_about.triggered.connect(self._on_about)

        file_menu = self.menuBar().addMenu("&File")
        for act in (self.act_add, self.act_change, self.act_delete):
            file_menu.addAction(act)
        file_menu.addSeparator()
        file_menu.addAction(act_exit)

        help_menu = self.menuBar().addMenu("&Help")
        help_menu.addAction(act_about)

        tb = self.addToolBar("Main")
        for act in (self.act_add, self.act_change, self.act_delete):
            tb.addAction(act)

        self._update_actions()

    # ───────────────────────────────────────────────────────────────────
    def refresh_view(self) -> None:
        """Re-read the store and redraw the table in the current sort order."""
        self._movies = self.sorter.apply(self.store.list())
        self.table.setRowCount(len(self._movies))
        for row, movie in enumerate(self._movies):
            values = (movie.title, movie.date_viewed, movie.rating, movie.comment)
            for col, value in enumerate(values):
                item = QTableWidgetItem(format_field(value))
                if col == 2:
                    item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
                self.table.setItem(row, col, item)
        self.table.clearSelection()
        self._update_actions()

    def selected_movie(self) -> Optional[Movie]:
        rows = self.table.selectionModel().selectedRows()
        if not rows:
            return None
        return self._movies[rows[0].row()]

    @Slot()
    def _update_actions(self) -> None:
        has_selection = self.selected_movie() is not None
        self.act_change.setEnabled(has_selection)
        self.act_delete.setEnabled(has_selection)

    @Slot(int)
    def _on_sort(self, column: int) -> None:
        self.sorter.click(column)
        log_debug(f"Sorting by {self.sorter.order.name} (reverse={self.sorter.reverse})")
        self.refresh_view()

    @Slot()
    def _on_add(self) -> None:
        if MovieDialog(self.store, Edit.ADD, parent=self).exec():
            self.refresh_view()

    @Slot()
    def _on_change(self) -> None:
        movie = self.selected_movie()
        if movie is None:
            return
        if MovieDialog(self.store, Edit.CHANGE, movie, parent=self).exec():
            self.refresh_view()

    @Slot()
    def _on_delete(self) -> None:
        movie = self.selected_movie()
        if movie is None:
            return
        reply = QMessageBox.question(
            self,
            "Delete Movie",
            f"Delete “{movie.title}”?",
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        if reply == QMessageBox.Yes:
            delete_movie(self.store, movie.id)
            self.refresh_view()

    @Slot()
    def _on_about(self) -> None:
        QMessageBox.information(
            self, "About",
            f"{APP_NAME} {APP_VERSION} - a personal list of movies you have seen.",
        )
