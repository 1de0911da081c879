import dataclasses
import itertools
from datetime import date
from decimal import Decimal

import pytest

from myMovies.core.models import Movie, SortOrder, sort_movies
from myMovies.errors import ParseError, ValidationError


def test_movie_valid():
    movie = Movie("Matrix", date(2020, 1, 1), Decimal("9.0"), "great")
    assert movie.title == "Matrix"
    assert movie.rating == Decimal("9.0")
    assert movie.id is None


def test_movie_rating_converted_to_decimal():
    movie = Movie("Matrix", rating=7.5)
    assert movie.rating == Decimal("7.5")
    assert isinstance(movie.rating, Decimal)


def test_movie_rating_bounds_inclusive():
    assert Movie("Low", rating=Decimal("0")).rating == 0
    assert Movie("High", rating=Decimal("10.0")).rating == 10


def test_movie_blank_title():
    with pytest.raises(ValidationError) as exc:
        Movie("   ")
    assert exc.value.messages == ["Title must have content"]


def test_movie_rating_too_low():
    with pytest.raises(ValidationError) as exc:
        Movie("Matrix", rating=Decimal("-0.1"))
    assert exc.value.messages == ["Rating cannot be less than 0."]


def test_movie_collects_every_problem():
    with pytest.raises(ValidationError) as exc:
        Movie("", rating=Decimal("15"))
    assert exc.value.messages == [
        "Title must have content",
        "Rating cannot be greater than 10.",
    ]


def test_movie_equality_ignores_id():
    a = Movie("Matrix", date(2020, 1, 1), Decimal("9.0"), id="1")
    b = Movie("Matrix", date(2020, 1, 1), Decimal("9.0"), id="2")
    assert a == b
    assert hash(a) == hash(b)
    assert a != Movie("Matrix", date(2020, 1, 2), Decimal("9.0"))


def test_movie_is_immutable():
    movie = Movie("Matrix")
    with pytest.raises(dataclasses.FrozenInstanceError):
        movie.title = "Other"


def test_with_id_returns_copy():
    movie = Movie("Matrix")
    saved = movie.with_id("7")
    assert saved.id == "7"
    assert movie.id is None
    assert saved == movie


def test_blank_comment_is_absent():
    assert Movie("Matrix", comment="  ").comment is None


def test_from_text_parses_fields():
    movie = Movie.from_text("Matrix", "2020-01-01", "9.0", "", id="3")
    assert movie == Movie("Matrix", date(2020, 1, 1), Decimal("9.0"))
    assert movie.id == "3"


def test_from_text_blank_fields_are_absent():
    movie = Movie.from_text("Matrix", " ", "", None)
    assert movie.date_viewed is None
    assert movie.rating is None


def test_from_text_reports_date_before_validation():
    with pytest.raises(ParseError) as exc:
        Movie.from_text("", "yesterday", "15", None)
    assert exc.value.field == "Date Viewed"
    assert len(exc.value.messages) == 1


def test_from_text_bad_rating():
    with pytest.raises(ParseError) as exc:
        Movie.from_text("Matrix", "2020-01-01", "nine", None)
    assert exc.value.field == "Rating"


def test_default_order_most_recent_first():
    b = Movie("B", date(2020, 2, 1))
    a = Movie("A", date(2020, 1, 1))
    assert sort_movies([a, b]) == [b, a]
    assert sorted([a, b]) == [b, a]
    assert sort_movies([b, a], SortOrder.TITLE) == [a, b]


def test_rating_order_high_first_then_unrated():
    low = Movie("Low", rating=Decimal("2"))
    high = Movie("High", rating=Decimal("9"))
    none = Movie("None")
    assert sort_movies([none, low, high], SortOrder.RATING) == [high, low, none]


def test_comment_order_missing_last():
    a = Movie("X", comment="alpha")
    b = Movie("X", comment="beta")
    none = Movie("X")
    assert sort_movies([none, b, a], SortOrder.COMMENT) == [a, b, none]


def test_default_order_undated_last():
    dated = Movie("Z", date(1999, 5, 5))
    undated = Movie("A")
    assert sort_movies([undated, dated]) == [dated, undated]


def test_default_order_tie_breaks():
    d = date(2021, 3, 3)
    movies = [
        Movie("B", d),
        Movie("A", d),
        Movie("A", d, Decimal("5")),
        Movie("A", d, Decimal("5"), "x"),
        Movie("A", d, Decimal("3")),
    ]
    assert sort_movies(movies) == [
        Movie("A", d, Decimal("3")),
        Movie("A", d, Decimal("5"), "x"),
        Movie("A", d, Decimal("5")),
        Movie("A", d),
        Movie("B", d),
    ]


def _every_combination():
    return [
        Movie(title, viewed, rating, comment)
        for title, viewed, rating, comment in itertools.product(
            ["A", "B"],
            [None, date(2020, 1, 1), date(2021, 6, 1)],
            [None, Decimal("0"), Decimal("7.5")],
            [None, "good", "meh"],
        )
    ]


@pytest.mark.parametrize("order", list(SortOrder))
def test_orders_are_total(order):
    movies = _every_combination()
    for a in movies:
        assert order.compare(a, a) == 0
        for b in movies:
            assert order.compare(a, b) == -order.compare(b, a)
            assert (order.compare(a, b) == 0) == (a == b)

    ordered = sort_movies(movies, order)
    for a, b in zip(ordered, ordered[1:]):
        assert order.compare(a, b) < 0
    for a, b, c in itertools.combinations(ordered, 3):
        assert order.compare(a, c) < 0


@pytest.mark.parametrize("order, attr", [
    (SortOrder.DEFAULT, "date_viewed"),
    (SortOrder.RATING, "rating"),
    (SortOrder.COMMENT, "comment"),
])
def test_primary_field_missing_sorts_last(order, attr):
    ordered = sort_movies(_every_combination(), order)
    present = [getattr(m, attr) is not None for m in ordered]
    assert present == sorted(present, reverse=True)


def test_default_order_matches_lt():
    movies = _every_combination()
    assert sorted(movies) == sort_movies(movies, SortOrder.DEFAULT)


@pytest.mark.parametrize("rating", [Decimal("NaN"), Decimal("Infinity"), float("nan"), float("-inf")])
def test_movie_rating_not_a_number(rating):
    with pytest.raises(ValidationError) as exc:
        Movie("", rating=rating)
    assert exc.value.messages == ["Title must have content", "Rating must be a number."]
