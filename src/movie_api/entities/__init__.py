"""Domain entities for internal representation.

Frozen dataclasses used by services and repositories. They are NOT the API
contract; the HTTP layer converts them to DTOs from the dto package.
"""

from .movie import Movie

__all__ = ["Movie"]
