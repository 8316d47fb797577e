import logging

import uvicorn
from fastapi import APIRouter, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy import Engine

from movie_api.api.dependencies import HandlerDep, MovieBodyDep, lifespan
from movie_api.config import settings
from movie_api.dto import HealthCheckResponse, MovieResponse
from movie_api.errors import InvalidInputError, MovieNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/movies", response_model=list[MovieResponse])
def list_movies(handler: HandlerDep) -> list[MovieResponse]:
    """List every movie."""
    return handler.list_movies()


@router.get("/movies/id/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: str, handler: HandlerDep) -> MovieResponse:
    """Get a single movie by id. 404 with an empty body if there is none."""
    return handler.get_movie(movie_id)


@router.get("/movies/name/{name}", response_model=list[MovieResponse])
def search_movies(name: str, handler: HandlerDep) -> list[MovieResponse]:
    """Find movies whose name matches a case-insensitive LIKE pattern."""
    return handler.search_movies(name)


@router.post("/movies", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(request: MovieBodyDep, handler: HandlerDep) -> MovieResponse:
    """Create a movie. The response carries the generated id."""
    return handler.create_movie(request)


@router.put("/movies/id/{movie_id}", response_model=MovieResponse, status_code=status.HTTP_202_ACCEPTED)
def update_movie(movie_id: str, request: MovieBodyDep, handler: HandlerDep) -> MovieResponse:
    """Rename a movie. Echoes the submitted body; absent ids are a no-op."""
    return handler.update_movie(movie_id, request)


@router.delete(
    "/movies/id/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_movie(movie_id: str, handler: HandlerDep) -> Response:
    """Delete a movie."""
    handler.delete_movie(movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/health", response_model=HealthCheckResponse)
def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return handler.health_check()


async def json_content_type(request: Request, call_next) -> Response:
    """Tag every response as JSON, whatever produced it."""
    response = await call_next(request)
    response.headers["Content-Type"] = "application/json"
    return response


async def movie_not_found(request: Request, exc: MovieNotFoundError) -> Response:
    logger.debug("%s %s: %s", request.method, request.url.path, exc.message)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message},
    )


def create_app(engine: Engine | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        engine: SQLAlchemy engine to serve from. If None, the lifespan
            creates one from DATABASE_URL at startup and disposes it on
            shutdown.

    Returns:
        The configured FastAPI app
    """
    app = FastAPI(
        title="Movie API",
        description="CRUD service for a single movies table",
        version="0.1.0",
        lifespan=lifespan,
    )
    if engine is not None:
        app.state.engine = engine

    app.middleware("http")(json_content_type)
    app.add_exception_handler(MovieNotFoundError, movie_not_found)
    app.add_exception_handler(InvalidInputError, invalid_input)
    app.include_router(router)
    return app


app = create_app()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging at LOG_LEVEL unless a level is given."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Run the API with uvicorn on the configured host and port."""
    configure_logging()
    uvicorn.run(
        "movie_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
