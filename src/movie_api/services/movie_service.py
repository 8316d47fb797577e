"""Movie service for core business logic.

Turns raw path/body values into store calls and decides what counts as
"not found". Storage failures propagate as ``StorageError`` except where the
delete flow reports them as not-found.
"""

import logging
import re

from movie_api.entities import Movie
from movie_api.errors import InvalidInputError, MovieNotFoundError, StorageError
from movie_api.protocols import MovieStore

logger = logging.getLogger(__name__)

# The id column is a 32-bit SERIAL; values outside it can never match a row.
MIN_MOVIE_ID = -(2**31)
MAX_MOVIE_ID = 2**31 - 1

# Postgres int4 input: optional sign, ASCII digits, surrounding whitespace
_MOVIE_ID_PATTERN = re.compile(r"[ \t\n\r\f\v]*[+-]?[0-9]+[ \t\n\r\f\v]*")


def parse_movie_id(raw_id: str) -> int | None:
    """Coerce a path id to an integer the id column can hold.

    Returns:
        The integer id, or None if the value is not an integer in range
    """
    if _MOVIE_ID_PATTERN.fullmatch(raw_id) is None:
        return None
    movie_id = int(raw_id)
    if not MIN_MOVIE_ID <= movie_id <= MAX_MOVIE_ID:
        return None
    return movie_id


class MovieService:
    """Movie CRUD orchestration service.

    Depends on the MovieStore PROTOCOL, not on a concrete repository, so the
    SQL repository can be swapped for an in-memory fake.

    Example:
        ```python
        from movie_api.repositories import SqlMovieRepository
        from movie_api.services import MovieService

        service = MovieService.create(repository=SqlMovieRepository.create())
        movie = service.create_movie("Dune")
        ```
    """

    def __init__(self, repository: MovieStore) -> None:
        """Initialize the movie service.

        Args:
            repository: Movie storage backend (required).
        """
        self._repository = repository

    @classmethod
    def create(cls, repository: MovieStore) -> "MovieService":
        """Factory method to create MovieService.

        Args:
            repository: Movie storage backend (required).

        Returns:
            Configured MovieService instance
        """
        return cls(repository=repository)

    def list_movies(self) -> list[Movie]:
        """Return all movies."""
        return self._repository.list_all()

    def get_movie(self, raw_id: str) -> Movie:
        """Look up a movie by its path id.

        Args:
            raw_id: The id as it appeared in the URL

        Returns:
            The matching movie

        Raises:
            MovieNotFoundError: If the id is not an integer or has no row
            StorageError: If the query fails
        """
        movie_id = parse_movie_id(raw_id)
        if movie_id is None:
            raise MovieNotFoundError(raw_id)

        movie = self._repository.find_by_id(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    def search_movies(self, pattern: str) -> list[Movie]:
        """Find movies by case-insensitive name pattern.

        The pattern is handed to the store untouched, so ``%`` and ``_``
        act as wildcards if the caller includes them.
        """
        return self._repository.find_by_name(pattern)

    def create_movie(self, name: str) -> Movie:
        """Insert a movie and return it with the id the store assigned."""
        movie = self._repository.insert(name)
        logger.info("Created movie %s", movie.id)
        return movie

    def update_movie(self, raw_id: str, name: str) -> int:
        """Rename a movie without checking that it exists.

        Returns:
            Number of rows affected (0 for an absent id)

        Raises:
            InvalidInputError: If the id is not an integer in range
            StorageError: If the update fails
        """
        movie_id = parse_movie_id(raw_id)
        if movie_id is None:
            raise InvalidInputError(f"Invalid movie id: {raw_id!r}")

        affected = self._repository.update_name(movie_id, name)
        if affected == 0:
            logger.debug("Update of movie %s matched no rows", movie_id)
        return affected

    def delete_movie(self, raw_id: str) -> None:
        """Delete a movie after checking that it exists.

        A failure of the delete statement itself is reported as not-found,
        matching the status the endpoint has always returned for it.

        Raises:
            MovieNotFoundError: If the movie is absent or the delete fails
            StorageError: If the existence check fails
        """
        movie = self.get_movie(raw_id)

        try:
            self._repository.delete(movie.id)
        except StorageError as e:
            logger.warning("Delete of movie %s failed: %s", movie.id, e)
            raise MovieNotFoundError(movie.id) from e

        logger.info("Movie deleted: %s", movie.id)

    def is_healthy(self) -> bool:
        """Check if the store is reachable."""
        return self._repository.health_check()

    @property
    def repository(self) -> MovieStore:
        """Get the underlying repository (for testing)."""
        return self._repository
