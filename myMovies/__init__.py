"""
myMovies
~~~~~~~~

Top-level package for the My Movies application.

Exports:
  - APP_NAME, APP_VERSION, DATA_DIR
  - Record model and store: Movie, SortOrder, sort_movies, MovieStore
  - Error types

The Qt front-end lives in ``myMovies.gui`` and is started by ``myMovies.main.main``.
"""

# settings
from myMovies.settings import APP_NAME, APP_VERSION, DATA_DIR

# core logic
from myMovies.core import Movie, SortOrder, sort_movies, MovieStore

# errors
from myMovies.errors import (
    MoviesError,
    InvalidInputError,
    ValidationError,
    ParseError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    NotFoundError,
)

__all__ = [
    # settings
    "APP_NAME",
    "APP_VERSION",
    "DATA_DIR",
    # core
    "Movie",
    "SortOrder",
    "sort_movies",
    "MovieStore",
    # errors
    "MoviesError",
    "InvalidInputError",
    "ValidationError",
    "ParseError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "NotFoundError",
]
