"""core.store
Flat-file store for Movie records.

All file I/O lives here; other layers import this module instead of
touching the movie list file directly.

One text file per user, ``movie_list_for_<user>.txt``: one line per movie,
fields ``title|date viewed|rating|comment``, ``NULL`` for an absent field.
The whole file is read into memory once (``load``) and written back once
(``shutdown``); every edit in between lives only in memory.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Dict, List, Optional

from myMovies import settings
from myMovies.core.models import Movie
from myMovies.errors import (
    InvalidInputError,
    NotFoundError,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from myMovies.utils import format_field, log_debug, log_error, parse_date, parse_decimal

_FIELD_COUNT = 4


def movies_file_name(user_name: str) -> str:
    """File name of *user_name*'s movie list (user name is case-folded)."""
    return f"{settings.MOVIES_FILE_PREFIX}{user_name.casefold()}{settings.MOVIES_FILE_SUFFIX}"


# ───────────────────────────── line codec ─────────────────────────────
def _maybe_null(text: str) -> Optional[str]:
    return None if text == settings.NULL_TOKEN else text


def _encode_field(value) -> str:
    text = format_field(value)
    return text if text.strip() else settings.NULL_TOKEN


def encode_line(movie: Movie) -> str:
    """One file line for *movie*, without the line terminator."""
    return settings.DELIMITER.join(
        _encode_field(v)
        for v in (movie.title, movie.date_viewed, movie.rating, movie.comment)
    )


def decode_line(line: str, movie_id: Optional[str] = None) -> Movie:
    """
    Parse one file line into a Movie.

    Raises
    ------
    ValueError
        If the line does not hold exactly four fields.
    InvalidInputError
        If the date or rating does not parse, or the record is invalid.
    """
    fields = line.split(settings.DELIMITER)
    if len(fields) != _FIELD_COUNT:
        raise ValueError(f"expected {_FIELD_COUNT} fields, found {len(fields)}")
    title, viewed, rating, comment = fields
    return Movie(
        title=title,
        date_viewed=parse_date(_maybe_null(viewed), "Date Viewed"),
        rating=parse_decimal(_maybe_null(rating), "Rating"),
        comment=_maybe_null(comment),
        id=movie_id,
    )


def _split_lines(text: str) -> List[str]:
    r"""Split on \n or \r\n only, so \x0c, \u2028 etc. stay inside their field."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


# ───────────────────────────── the store ──────────────────────────────
class MovieStore:
    """In-memory table of movies for one user, backed by a text file."""

    def __init__(self, user_name: str, data_dir: Optional[Path] = None) -> None:
        self.user_name = user_name
        self.path = Path(data_dir if data_dir is not None else settings.DATA_DIR) / movies_file_name(user_name)
        self.last_error: Optional[StorageError] = None
        self._table: Dict[str, Movie] = {}
        self._next_id = 0
        self._loaded = False
        self._shut_down = False

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, movie_id: object) -> bool:
        return movie_id in self._table

    # ───────────────────────────── lifecycle ─────────────────────────
    def load(self) -> Dict[str, Movie]:
        """Read the whole file into memory; return a copy of the table.

        A missing file is normal (first run). A file that cannot be read or
        parsed is logged, kept in ``last_error``, and the table starts empty.
        """
        if self._loaded:
            raise RuntimeError("MovieStore.load() may only be called once")
        self._loaded = True
        log_debug(f"Reading movies from: {self.path}")

        try:
            # newline="" keeps \r and other separators inside fields intact
            with self.path.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except FileNotFoundError:
            log_debug("Movies file not present. Will be created when the app closes.")
            return dict(self._table)
        except (OSError, UnicodeDecodeError) as e:
            self._fail_read(StorageReadError(f"Unable to read the movies file: {e}", self.path))
            return dict(self._table)

        table: Dict[str, Movie] = {}
        for lineno, line in enumerate(_split_lines(text), start=1):
            if not line.strip():
                continue
            try:
                movie = decode_line(line, self._new_id())
            except (ValueError, InvalidInputError) as e:
                self._fail_read(StorageReadError(
                    f"Movies file not in expected format, line {lineno} ({e}): {line}",
                    self.path,
                    line,
                ))
                return dict(self._table)
            table[movie.id] = movie

        self._table = table
        log_debug(f"Number of movies read in from file: {len(self._table)}")
        return dict(self._table)

    def shutdown(self) -> None:
        """Write every movie back to the file, replacing its contents."""
        if self._shut_down:
            raise RuntimeError("MovieStore.shutdown() may only be called once")
        self._shut_down = True
        log_debug(f"Writing {len(self._table)} movies to: {self.path}")

        contents = "".join(encode_line(m) + os.linesep for m in self._table.values())
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # newline="" → os.linesep is written as-is
            with self.path.open("w", encoding="utf-8", newline="") as f:
                f.write(contents)
        except OSError as e:
            self.last_error = StorageWriteError(f"Problem while saving movies file: {e}", self.path)
            log_error(str(self.last_error))

    # ───────────────────────────── edits ─────────────────────────────
    def add(self, movie: Movie) -> str:
        """Store a new movie and return the id assigned to it."""
        if movie.id is not None:
            raise ValueError(f"New movie already has an id: {movie.id!r}")
        movie_id = self._new_id()
        self._table[movie_id] = movie.with_id(movie_id)
        log_debug(f"Added movie {movie_id}: {movie.title}")
        return movie_id

    def change(self, movie: Movie) -> None:
        """Replace the stored movie that has the same id."""
        if movie.id is None or movie.id not in self._table:
            raise NotFoundError(movie.id)
        self._table[movie.id] = movie
        log_debug(f"Changed movie {movie.id}: {movie.title}")

    def delete(self, movie_id: str) -> None:
        """Remove a movie; unknown ids are ignored."""
        if self._table.pop(movie_id, None) is not None:
            log_debug(f"Deleted movie {movie_id}")

    # ───────────────────────────── look-ups ──────────────────────────
    def get(self, movie_id: str) -> Movie:
        try:
            return self._table[movie_id]
        except KeyError:
            raise NotFoundError(movie_id) from None

    def list(self) -> List[Movie]:
        """All movies, most recently viewed first (a fresh list each call)."""
        return sorted(self._table.values())

    # ───────────────────────────── helpers ───────────────────────────
    def _new_id(self) -> str:
        self._next_id += 1
        return str(self._next_id)

    def _fail_read(self, error: StorageReadError) -> None:
        self._table = {}
        self.last_error = error
        log_error(str(error))
