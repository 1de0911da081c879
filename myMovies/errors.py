"""
errors
~~~~~~
Exception types raised by the record model and the flat-file store.

* ``InvalidInputError`` family – user input problems, always shown to the user.
* ``StorageError`` family     – file problems, logged by the store, never raised to the GUI.
* ``NotFoundError``          – an id that is not in the store's table.
"""

from __future__ import annotations
from pathlib import Path


class MoviesError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(MoviesError):
    """User input that cannot become a ``Movie``; carries one message per problem."""

    def __init__(self, messages: list[str] | str) -> None:
        if isinstance(messages, str):
            messages = [messages]
        self.messages: list[str] = list(messages)
        super().__init__("; ".join(self.messages))


class ValidationError(InvalidInputError):
    """One or more record rules are violated (blank title, rating out of range)."""


class ParseError(InvalidInputError):
    """A single text field (date, rating) could not be parsed."""

    def __init__(self, field: str, text: str, expected: str) -> None:
        self.field = field
        self.text = text
        super().__init__(f"{field} is not a valid {expected}: {text!r}")


class StorageError(MoviesError):
    """Reading or writing the backing file failed."""

    def __init__(self, message: str, path: Path, line: str | None = None) -> None:
        self.path = path
        self.line = line
        super().__init__(message)


class StorageReadError(StorageError):
    pass


class StorageWriteError(StorageError):
    pass


class NotFoundError(MoviesError, KeyError):
    """No record with the given id."""

    def __init__(self, movie_id: str | None) -> None:
        self.movie_id = movie_id
        super().__init__(f"No movie with id {movie_id!r}")

    def __str__(self) -> str:
        return self.args[0]
