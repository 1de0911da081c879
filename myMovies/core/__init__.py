"""
core
~~~~
Record model + flat-file store. No Qt imports here.
"""

from myMovies.core.models import Movie, SortOrder, sort_movies
from myMovies.core.store  import MovieStore, decode_line, encode_line, movies_file_name

__all__ = [
    "Movie",
    "SortOrder",
    "sort_movies",
    "MovieStore",
    "decode_line",
    "encode_line",
    "movies_file_name",
]
