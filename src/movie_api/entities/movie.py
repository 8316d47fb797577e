"""Movie domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    """A row of the movies table.

    Attributes:
        id: Primary key, assigned by the database on insert
        name: Movie title
    """

    id: int
    name: str
