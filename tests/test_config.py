"""
Tests for settings and engine construction.
"""

import pytest
from sqlalchemy.pool import StaticPool

from movie_api.config import Settings, create_db_engine, normalize_database_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://u:p@db:5432/movies", "postgresql+psycopg://u:p@db:5432/movies"),
        ("postgresql://u:p@db/movies", "postgresql+psycopg://u:p@db/movies"),
        ("postgresql+psycopg://u:p@db/movies", "postgresql+psycopg://u:p@db/movies"),
        ("sqlite:///movies.db", "sqlite:///movies.db"),
    ],
)
def test_normalize_database_url(url, expected):
    """libpq-style URLs are pointed at the psycopg driver."""
    assert normalize_database_url(url) == expected


def test_in_memory_sqlite_shares_one_connection():
    """In-memory SQLite uses a static pool so all threads see one database."""
    engine = create_db_engine("sqlite://")
    try:
        assert isinstance(engine.pool, StaticPool)
    finally:
        engine.dispose()


@pytest.mark.parametrize(
    "url",
    [
        "sqlite+pysqlite://",
        "sqlite:///:memory:",
        "sqlite+pysqlite:///:memory:",
        "sqlite:///file:movies?mode=memory&cache=shared&uri=true",
    ],
)
def test_in_memory_sqlite_variants_share_one_connection(url):
    """Every spelling of an in-memory SQLite URL gets the static pool."""
    engine = create_db_engine(url)
    try:
        assert isinstance(engine.pool, StaticPool)
    finally:
        engine.dispose()


def test_file_sqlite_uses_regular_pool(tmp_path):
    """A SQLite database on disk keeps the default connection pool."""
    engine = create_db_engine(f"sqlite+pysqlite:///{tmp_path / 'movies.db'}")
    try:
        assert not isinstance(engine.pool, StaticPool)
    finally:
        engine.dispose()


def test_postgres_engine_uses_psycopg():
    """Postgres URLs build an engine on the psycopg dialect without connecting."""
    engine = create_db_engine("postgres://u:p@localhost:5432/movies")
    try:
        assert engine.dialect.name == "postgresql"
        assert engine.dialect.driver == "psycopg"
    finally:
        engine.dispose()


def test_settings_reject_bad_port():
    """Ports outside 1-65535 are rejected."""
    with pytest.raises(ValueError):
        Settings(api_port=0)


def test_settings_reject_bad_log_level():
    """Unknown log levels are rejected."""
    with pytest.raises(ValueError):
        Settings(log_level="LOUD")

