"""Shared fixtures for movie API tests."""

import fnmatch

import pytest
from fastapi.testclient import TestClient

from movie_api.api.app import create_app
from movie_api.config import create_db_engine
from movie_api.entities import Movie
from movie_api.errors import StorageError
from movie_api.repositories import SqlMovieRepository


class InMemoryMovieStore:
    """MovieStore fake backed by a dict, for service tests."""

    def __init__(self) -> None:
        self.rows: dict[int, str] = {}
        self.calls: list[str] = []
        self.fail_on: set[str] = set()
        self._next_id = 1

    def _call(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise StorageError(name, RuntimeError("store unavailable"))

    def list_all(self) -> list[Movie]:
        self._call("list_all")
        return [Movie(id=i, name=n) for i, n in sorted(self.rows.items())]

    def find_by_id(self, movie_id: int) -> Movie | None:
        self._call("find_by_id")
        if movie_id not in self.rows:
            return None
        return Movie(id=movie_id, name=self.rows[movie_id])

    def find_by_name(self, pattern: str) -> list[Movie]:
        self._call("find_by_name")
        glob = pattern.lower().replace("%", "*").replace("_", "?")
        return [
            Movie(id=i, name=n)
            for i, n in sorted(self.rows.items())
            if fnmatch.fnmatchcase(n.lower(), glob)
        ]

    def insert(self, name: str) -> Movie:
        self._call("insert")
        movie_id = self._next_id
        self._next_id += 1
        self.rows[movie_id] = name
        return Movie(id=movie_id, name=name)

    def update_name(self, movie_id: int, name: str) -> int:
        self._call("update_name")
        if movie_id not in self.rows:
            return 0
        self.rows[movie_id] = name
        return 1

    def delete(self, movie_id: int) -> int:
        self._call("delete")
        return 1 if self.rows.pop(movie_id, None) is not None else 0

    def health_check(self) -> bool:
        return "health_check" not in self.fail_on


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_db_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    """SQL repository over the in-memory database."""
    return SqlMovieRepository.create(engine=engine)


@pytest.fixture
def store():
    """In-memory MovieStore fake."""
    return InMemoryMovieStore()


@pytest.fixture
def client(engine):
    """Test client with the app lifespan running against the test database."""
    with TestClient(create_app(engine=engine)) as client:
        yield client
