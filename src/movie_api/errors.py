"""Error hierarchy for movie operations.

Services and repositories raise these; the HTTP layer maps them to status
codes:

    MovieNotFoundError -> 404 (empty body)
    InvalidInputError  -> 400
    StorageError       -> 500
"""


class MovieError(Exception):
    """Base exception for all movie API errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MovieNotFoundError(MovieError):
    """No movie row matches the requested id."""

    def __init__(self, movie_id: str | int) -> None:
        super().__init__(f"Movie {movie_id} not found")
        self.movie_id = movie_id


class InvalidInputError(MovieError):
    """Request body or path parameter could not be coerced to the movie shape."""


class StorageError(MovieError):
    """The database rejected or failed a statement."""

    def __init__(self, operation: str, cause: Exception) -> None:
        super().__init__(f"{operation}: {cause}")
        self.operation = operation
        self.cause = cause
