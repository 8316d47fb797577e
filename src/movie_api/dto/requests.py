"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class MovieRequest(BaseModel):
    """Request DTO for creating or updating a movie.

    Missing fields fall back to their zero values. The id is never used to
    address a row; update echoes it back as submitted.
    """

    model_config = ConfigDict(extra="ignore")

    id: int = Field(0, description="Ignored on create; echoed back on update")
    name: str = Field("", description="The movie name")
