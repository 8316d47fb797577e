"""Protocol interfaces for swappable implementations.

Usage:
    ```python
    from movie_api.protocols import MovieStore

    repo: MovieStore = SqlMovieRepository.create()
    repo: MovieStore = InMemoryMovieStore()  # e.g. in tests
    ```
"""

from .movie_store import MovieStore

__all__ = [
    "MovieStore",
]
