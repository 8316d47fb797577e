"""Movie storage protocol.

Defines the interface for any backend that can persist movie rows.

Implementations can include:
- SQLAlchemy over PostgreSQL (default)
- SQLAlchemy over SQLite (local development, tests)
- In-memory fakes for unit tests
"""

from typing import Protocol, runtime_checkable

from movie_api.entities import Movie


@runtime_checkable
class MovieStore(Protocol):
    """Protocol for movie storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.

    Every method issues a single statement against the store and raises
    ``StorageError`` when the store fails.
    """

    def list_all(self) -> list[Movie]:
        """Return every movie, ordered by id."""
        ...

    def find_by_id(self, movie_id: int) -> Movie | None:
        """Return the movie with this id, or None."""
        ...

    def find_by_name(self, pattern: str) -> list[Movie]:
        """Return movies whose name matches a case-insensitive LIKE pattern.

        Args:
            pattern: SQL LIKE pattern, wildcards passed through as given
        """
        ...

    def insert(self, name: str) -> Movie:
        """Insert a movie and return it with its generated id."""
        ...

    def update_name(self, movie_id: int, name: str) -> int:
        """Set the name of a movie.

        Returns:
            Number of rows affected (0 when the id is absent)
        """
        ...

    def delete(self, movie_id: int) -> int:
        """Delete a movie.

        Returns:
            Number of rows deleted
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is reachable."""
        ...
