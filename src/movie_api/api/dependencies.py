"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Engine, repository, service and handler built once during lifespan
    - Dependency functions retrieve from request.app.state
    - No global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from pydantic import ValidationError

from movie_api.config import get_engine
from movie_api.dto import MovieRequest
from movie_api.errors import InvalidInputError
from movie_api.handlers import MovieHandler
from movie_api.repositories import SqlMovieRepository
from movie_api.services import MovieService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> MovieHandler:
    """Dependency injection for MovieHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "movie_handler", None)
    if handler is None:
        raise RuntimeError("MovieHandler not initialized. Check lifespan setup.")
    return handler


async def get_movie_body(request: Request) -> MovieRequest:
    """Decode the request body as a movie, whatever its Content-Type.

    Raises:
        InvalidInputError: If the body is not a JSON object of the movie shape
    """
    body = await request.body()
    try:
        return MovieRequest.model_validate_json(body)
    except ValidationError as e:
        reasons = "; ".join(error["msg"] for error in e.errors())
        raise InvalidInputError(f"Invalid movie body: {reasons}") from e


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Engine (connection pool) - taken from app.state.engine if the app
       factory was given one, otherwise built from DATABASE_URL
    2. Repository (data access) - creates the movies table if absent
    3. Service (business logic) - stored in app.state.movie_service
    4. Handler (HTTP endpoints) - stored in app.state.movie_handler

    Any failure here (unreachable database, schema error) propagates and
    aborts startup.

    Cleanup:
        Removes the layers from app.state and disposes an engine it created
    """
    engine = getattr(app.state, "engine", None)
    owns_engine = engine is None
    if owns_engine:
        engine = get_engine()

    repository = SqlMovieRepository.create(engine=engine)
    movie_service = MovieService.create(repository=repository)
    movie_handler = MovieHandler(movie_service=movie_service)

    app.state.repository = repository
    app.state.movie_service = movie_service
    app.state.movie_handler = movie_handler

    logger.info("Movie service initialized (database: %s)", engine.url.render_as_string(hide_password=True))

    yield

    del app.state.movie_handler
    del app.state.movie_service
    del app.state.repository
    if owns_engine:
        engine.dispose()
    logger.info("Movie service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[MovieHandler, Depends(get_handler)]
MovieBodyDep = Annotated[MovieRequest, Depends(get_movie_body)]
