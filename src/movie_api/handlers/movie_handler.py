"""HTTP handlers for movie operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error responses.
"""

from fastapi import HTTPException, status

from movie_api.dto import HealthCheckResponse, MovieRequest, MovieResponse
from movie_api.errors import StorageError
from movie_api.services import MovieService


class MovieHandler:
    """HTTP handlers for movie operations.

    This handler delegates business logic to MovieService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Turning storage failures into 500 responses

    ``MovieNotFoundError`` and ``InvalidInputError`` are left to propagate;
    the app maps them to an empty-bodied 404 and a 400.

    Example:
        ```python
        handler = MovieHandler(movie_service=service)

        @app.get("/movies", response_model=list[MovieResponse])
        def list_movies():
            return handler.list_movies()
        ```
    """

    def __init__(self, movie_service: MovieService) -> None:
        """Initialize the movie handler.

        Args:
            movie_service: The movie service for business logic (required).
        """
        self._movies = movie_service

    def list_movies(self) -> list[MovieResponse]:
        """Handle GET /movies requests."""
        try:
            movies = self._movies.list_movies()
        except StorageError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to list movies: {e.cause}",
            ) from e

        return [MovieResponse.from_entity(movie) for movie in movies]

    def get_movie(self, movie_id: str) -> MovieResponse:
        """Handle GET /movies/id/{id} requests.

        Raises:
            MovieNotFoundError: If no movie has this id
            HTTPException: If the lookup fails
        """
        try:
            movie = self._movies.get_movie(movie_id)
        except StorageError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to get movie: {e.cause}",
            ) from e

        return MovieResponse.from_entity(movie)

    def search_movies(self, name: str) -> list[MovieResponse]:
        """Handle GET /movies/name/{name} requests."""
        try:
            movies = self._movies.search_movies(name)
        except StorageError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to search movies: {e.cause}",
            ) from e

        return [MovieResponse.from_entity(movie) for movie in movies]

    def create_movie(self, request: MovieRequest) -> MovieResponse:
        """Handle POST /movies requests.

        The id in the request body is ignored; the response carries the id
        the database assigned.
        """
        try:
            movie = self._movies.create_movie(request.name)
        except StorageError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to create movie: {e.cause}",
            ) from e

        return MovieResponse.from_entity(movie)

    def update_movie(self, movie_id: str, request: MovieRequest) -> MovieResponse:
        """Handle PUT /movies/id/{id} requests.

        Returns:
            The submitted movie, echoed back as received

        Raises:
            InvalidInputError: If the id is not an integer
            HTTPException: If the update fails
        """
        try:
            self._movies.update_movie(movie_id, request.name)
        except StorageError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to update movie: {e.cause}",
            ) from e

        return MovieResponse(id=request.id, name=request.name)

    def delete_movie(self, movie_id: str) -> None:
        """Handle DELETE /movies/id/{id} requests.

        Raises:
            MovieNotFoundError: If the movie is absent or could not be deleted
            HTTPException: If the existence check fails
        """
        try:
            self._movies.delete_movie(movie_id)
        except StorageError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to delete movie: {e.cause}",
            ) from e

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = self._movies.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            database_healthy=is_healthy,
        )
