from __future__ import annotations
from enum import Enum
from typing import List, Optional

from myMovies.core.models import Movie, SortOrder, sort_movies
from myMovies.core.store  import MovieStore
from myMovies.settings    import MAX_LOGIN_ATTEMPTS
from myMovies.utils       import log_debug, text_has_content

# table columns, in display order
COLUMNS = ("Title", "Viewed", "Rating", "Comment")

_COLUMN_ORDERS = {
    0: SortOrder.TITLE,
    1: SortOrder.DEFAULT,
    2: SortOrder.RATING,
    3: SortOrder.COMMENT,
}


class Edit(Enum):
    """Kinds of edit the user can make to the movie list."""
    ADD    = "Add"
    CHANGE = "Change"
    DELETE = "Delete"

    def __str__(self) -> str:
        return self.value


def is_valid_login(user_name: str, password: str) -> bool:
    """
    Toy credential check: any non-blank user name is accepted except
    ``failme``, which exists to exercise the failure path.
    """
    return text_has_content(user_name) and user_name != "failme"


class LoginAttempts:
    """Counts login tries; after ``max_attempts`` failures the app gives up."""

    def __init__(self, max_attempts: int = MAX_LOGIN_ATTEMPTS) -> None:
        self.max_attempts = max_attempts
        self.count = 0

    def check(self, user_name: str, password: str) -> bool:
        self.count += 1
        return is_valid_login(user_name, password)

    @property
    def exhausted(self) -> bool:
        return self.count >= self.max_attempts


def save_movie(
    store: MovieStore,
    edit: Edit,
    title: str,
    date_viewed: str,
    rating: str,
    comment: str,
    movie_id: Optional[str] = None,
) -> str:
    """
    Add a new movie, or change an existing one, from raw dialog text.

    Returns the movie's id.

    Raises
    ------
    ParseError       date or rating text does not parse (first one only).
    ValidationError  title blank and/or rating out of range (all messages).
    NotFoundError    CHANGE of an id that is not in the store.
    """
    log_debug(f"{edit} movie {title!r}")
    if edit is Edit.ADD:
        movie = Movie.from_text(title, date_viewed, rating, comment)
        return store.add(movie)
    if edit is Edit.CHANGE:
        movie = Movie.from_text(title, date_viewed, rating, comment, id=movie_id)
        store.change(movie)
        return movie.id
    raise ValueError(f"save_movie cannot perform {edit}")


def delete_movie(store: MovieStore, movie_id: str) -> None:
    log_debug(f"{Edit.DELETE} movie {movie_id}")
    store.delete(movie_id)


class ColumnSorter:
    """
    Click-to-sort state for the movie table.

    Each column has its own order; every second click on the same column
    reverses it. Clicking another column starts it in its own direction.
    """

    def __init__(self) -> None:
        self.column: Optional[int] = None
        self.clicks = 0
        self.order = SortOrder.DEFAULT
        self.reverse = False

    def click(self, column: int) -> None:
        if column not in _COLUMN_ORDERS:
            raise IndexError(f"No such column: {column}")
        if column != self.column:
            self.column = column
            self.clicks = 0
        self.clicks += 1
        self.order = _COLUMN_ORDERS[column]
        self.reverse = self.clicks % 2 == 0

    def apply(self, movies: List[Movie]) -> List[Movie]:
        return sort_movies(movies, self.order, self.reverse)
