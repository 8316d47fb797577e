"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from movie_api.entities import Movie


class MovieResponse(BaseModel):
    """Response DTO for a single movie."""

    id: int = Field(..., description="Movie id assigned by the database")
    name: str = Field(..., description="The movie name")

    @classmethod
    def from_entity(cls, movie: Movie) -> "MovieResponse":
        return cls(id=movie.id, name=movie.name)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    database_healthy: bool = Field(..., description="Whether the database is reachable")
