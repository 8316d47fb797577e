"""Movie API - CRUD HTTP service over a single movies table.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (MovieStore)
    - repositories: Data access implementations (SQLAlchemy)
    - services: Business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from movie_api.repositories import SqlMovieRepository
    from movie_api.services import MovieService

    service = MovieService.create(repository=SqlMovieRepository.create())
    ```

For HTTP API:
    ```python
    from movie_api.api.app import app, create_app
    ```
"""

from movie_api.config import get_engine, settings
from movie_api.dto import MovieRequest, MovieResponse
from movie_api.entities import Movie
from movie_api.errors import InvalidInputError, MovieError, MovieNotFoundError, StorageError
from movie_api.handlers import MovieHandler
from movie_api.protocols import MovieStore
from movie_api.repositories import SqlMovieRepository
from movie_api.services import MovieService

__all__ = [
    # Configuration
    "settings",
    "get_engine",
    # Protocols (interfaces)
    "MovieStore",
    # Services (business logic)
    "MovieService",
    # Handlers (HTTP)
    "MovieHandler",
    # Repositories (data access)
    "SqlMovieRepository",
    # Entities (domain models)
    "Movie",
    # DTOs (API contracts)
    "MovieRequest",
    "MovieResponse",
    # Errors
    "MovieError",
    "MovieNotFoundError",
    "InvalidInputError",
    "StorageError",
]
