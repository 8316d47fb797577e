"""SQLAlchemy implementation of MovieStore.

Uses SQLAlchemy Core against a single ``movies`` table. Every method runs
exactly one bound-parameter statement; writes commit on their own through
``engine.begin()``. Works with PostgreSQL (default) and SQLite.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import (
    Column,
    Engine,
    Integer,
    MetaData,
    Table,
    Text,
    delete,
    insert,
    select,
    text,
    update,
)
from sqlalchemy.exc import SQLAlchemyError

from movie_api.config import get_engine
from movie_api.entities import Movie
from movie_api.errors import StorageError

logger = logging.getLogger(__name__)

metadata = MetaData()

movies_table = Table(
    "movies",
    metadata,
    # SERIAL on PostgreSQL, INTEGER PRIMARY KEY on SQLite
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text),
)


class SqlMovieRepository:
    """SQL implementation of the MovieStore protocol.

    This class satisfies the MovieStore protocol through structural
    typing - no explicit inheritance needed.

    The engine is the shared, thread-safe connection pool; each call checks
    out one connection for the duration of its statement.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the repository.

        Args:
            engine: SQLAlchemy engine. If None, creates one from settings.
        """
        self._engine = engine or get_engine()

        # Initialize the schema
        self._ensure_schema()

    @classmethod
    def create(cls, engine: Engine | None = None) -> "SqlMovieRepository":
        """Factory method to create SqlMovieRepository with defaults.

        Args:
            engine: SQLAlchemy engine. If None, uses DATABASE_URL from settings.

        Returns:
            Configured SqlMovieRepository
        """
        return cls(engine=engine)

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.exception("Storage error during %s: %s", operation, e)
            raise StorageError(operation, e) from e

    def _ensure_schema(self) -> None:
        """Create the movies table if it doesn't exist."""
        with self._translate_errors("create schema"):
            metadata.create_all(self._engine, checkfirst=True)
        logger.info("Movies table ready")

    def list_all(self) -> list[Movie]:
        """Return every movie, ordered by id."""
        query = select(movies_table.c.id, movies_table.c.name).order_by(movies_table.c.id)
        with self._translate_errors("list movies"), self._engine.connect() as conn:
            rows = conn.execute(query).all()
        return [Movie(id=row.id, name=row.name) for row in rows]

    def find_by_id(self, movie_id: int) -> Movie | None:
        """Return the movie with this id, or None."""
        query = select(movies_table.c.id, movies_table.c.name).where(movies_table.c.id == movie_id)
        with self._translate_errors("get movie"), self._engine.connect() as conn:
            row = conn.execute(query).first()
        if row is None:
            return None
        return Movie(id=row.id, name=row.name)

    def find_by_name(self, pattern: str) -> list[Movie]:
        """Return movies whose name matches the pattern, ignoring case.

        Compiles to ``ILIKE`` on PostgreSQL and ``lower(name) LIKE lower(?)``
        elsewhere. The pattern is bound as-is; wildcards are not escaped.
        """
        query = (
            select(movies_table.c.id, movies_table.c.name)
            .where(movies_table.c.name.ilike(pattern))
            .order_by(movies_table.c.id)
        )
        with self._translate_errors("search movies"), self._engine.connect() as conn:
            rows = conn.execute(query).all()
        return [Movie(id=row.id, name=row.name) for row in rows]

    def insert(self, name: str) -> Movie:
        """Insert a movie and return it with its generated id."""
        statement = insert(movies_table).values(name=name)
        with self._translate_errors("create movie"), self._engine.begin() as conn:
            result = conn.execute(statement)
            movie_id = result.inserted_primary_key[0]
        return Movie(id=movie_id, name=name)

    def update_name(self, movie_id: int, name: str) -> int:
        """Set the name of a movie; returns the affected row count."""
        statement = update(movies_table).where(movies_table.c.id == movie_id).values(name=name)
        with self._translate_errors("update movie"), self._engine.begin() as conn:
            result = conn.execute(statement)
            count = result.rowcount
        return count

    def delete(self, movie_id: int) -> int:
        """Delete a movie; returns the deleted row count."""
        statement = delete(movies_table).where(movies_table.c.id == movie_id)
        with self._translate_errors("delete movie"), self._engine.begin() as conn:
            result = conn.execute(statement)
            count = result.rowcount
        return count

    def health_check(self) -> bool:
        """Check if the database is reachable.

        Returns:
            True if healthy, False otherwise
        """
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    @property
    def engine(self) -> Engine:
        """Get the SQLAlchemy engine."""
        return self._engine
