"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .movie_service import MovieService, parse_movie_id

__all__ = [
    "MovieService",
    "parse_movie_id",
]
