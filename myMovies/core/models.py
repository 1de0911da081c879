# Movie dataclass + sort orders
from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from functools import total_ordering
from typing import Any, Callable, Iterable, List, Optional, Tuple

from myMovies.errors import ValidationError
from myMovies.utils import parse_date, parse_decimal, text_has_content

RATING_MIN = Decimal("0")
RATING_MAX = Decimal("10.0")


@total_ordering
@dataclass(frozen=True, slots=True)
class Movie:
    """
    One entry in the user's viewing list.

    Validated on construction; ``id`` is assigned by the store and takes no
    part in equality, hashing or ordering. Natural order (``<``) is
    ``SortOrder.DEFAULT``.
    """
    title: str
    date_viewed: date | None = None
    rating: Decimal | None = None
    comment: str | None = None
    id: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.rating is not None and not isinstance(self.rating, Decimal):
            object.__setattr__(self, "rating", Decimal(str(self.rating)))
        if not text_has_content(self.comment):
            object.__setattr__(self, "comment", None)
        self._validate()

    def _validate(self) -> None:
        problems: list[str] = []
        if not text_has_content(self.title):
            problems.append("Title must have content")
        if self.rating is not None and not self.rating.is_finite():
            problems.append("Rating must be a number.")
        elif self.rating is not None:
            if self.rating < RATING_MIN:
                problems.append("Rating cannot be less than 0.")
            if self.rating > RATING_MAX:
                problems.append("Rating cannot be greater than 10.")
        if problems:
            raise ValidationError(problems)

    @classmethod
    def from_text(
        cls,
        title: str,
        date_viewed: Optional[str],
        rating: Optional[str],
        comment: Optional[str],
        id: Optional[str] = None,
    ) -> "Movie":
        """
        Build a Movie from raw text as typed by the user.

        Date and rating are parsed first; the first one that fails raises a
        ParseError on its own. Only when both parse does validation run.
        """
        viewed = parse_date(date_viewed, "Date Viewed")
        score = parse_decimal(rating, "Rating")
        return cls(title=title, date_viewed=viewed, rating=score, comment=comment, id=id)

    def with_id(self, movie_id: str) -> "Movie":
        """Copy of this movie carrying *movie_id*."""
        return replace(self, id=movie_id)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        return _default_key(self) < _default_key(other)


# ─────────────────────────── sort keys ────────────────────────────────
# Absent values go last in every key, whatever the direction of the field.

def _asc(value: Any, empty: Any) -> Tuple[bool, Any]:
    return (value is None, empty if value is None else value)


def _desc_date(value: Optional[date]) -> Tuple[bool, int]:
    return (value is None, 0 if value is None else -value.toordinal())


def _desc_rating(value: Optional[Decimal]) -> Tuple[bool, Decimal]:
    return (value is None, RATING_MIN if value is None else -value)


def _default_key(m: Movie) -> tuple:
    return (
        _desc_date(m.date_viewed),
        m.title,
        _asc(m.rating, RATING_MIN),
        _asc(m.comment, ""),
    )


def _title_key(m: Movie) -> tuple:
    return (
        m.title,
        _desc_date(m.date_viewed),
        _asc(m.rating, RATING_MIN),
        _asc(m.comment, ""),
    )


def _rating_key(m: Movie) -> tuple:
    return (
        _desc_rating(m.rating),
        _desc_date(m.date_viewed),
        m.title,
        _asc(m.comment, ""),
    )


def _comment_key(m: Movie) -> tuple:
    return (
        _asc(m.comment, ""),
        m.title,
        _asc(m.rating, RATING_MIN),
        _desc_date(m.date_viewed),
    )


class SortOrder(Enum):
    """The four total orders available on the movie table."""
    DEFAULT = "default"   # date viewed (recent first), title, rating, comment
    TITLE   = "title"     # title, date viewed (recent first), rating, comment
    RATING  = "rating"    # rating (high first), date viewed (recent first), title, comment
    COMMENT = "comment"   # comment, title, rating, date viewed (recent first)

    @property
    def key(self) -> Callable[[Movie], tuple]:
        return _SORT_KEYS[self]

    def compare(self, a: Movie, b: Movie) -> int:
        """Comparator form: -1, 0 or 1."""
        ka, kb = self.key(a), self.key(b)
        return (ka > kb) - (ka < kb)


_SORT_KEYS = {
    SortOrder.DEFAULT: _default_key,
    SortOrder.TITLE:   _title_key,
    SortOrder.RATING:  _rating_key,
    SortOrder.COMMENT: _comment_key,
}


def sort_movies(
    movies: Iterable[Movie],
    order: SortOrder = SortOrder.DEFAULT,
    reverse: bool = False,
) -> List[Movie]:
    """Return a new list of *movies* in *order* (optionally reversed)."""
    return sorted(movies, key=order.key, reverse=reverse)
