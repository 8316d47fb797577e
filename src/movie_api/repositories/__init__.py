"""Repository layer for data access.

This layer hides the database behind the MovieStore protocol, so services
can be exercised against an in-memory fake in unit tests.
"""

from movie_api.protocols import MovieStore

from .sql_repository import SqlMovieRepository, metadata, movies_table

__all__ = [
    "MovieStore",
    "SqlMovieRepository",
    "metadata",
    "movies_table",
]
