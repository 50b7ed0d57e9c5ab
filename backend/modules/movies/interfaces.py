"""
Movie catalog interface.

The API layer depends on IMovieCatalog; TmdbService is the implementation.
"""

from typing import Protocol, runtime_checkable

from .models import MovieDetails, PaginatedMovies


@runtime_checkable
class IMovieCatalog(Protocol):
    """Read-only access to movie listings, search and details."""

    async def get_trending_movies(self, page: int = 1) -> PaginatedMovies:
        """Movies trending this week."""
        ...

    async def get_popular_movies(self, page: int = 1) -> PaginatedMovies:
        """Currently popular movies."""
        ...

    async def get_top_rated_movies(self, page: int = 1) -> PaginatedMovies:
        """Highest rated movies."""
        ...

    async def search_movies(self, query: str, page: int = 1) -> PaginatedMovies:
        """
        Search movies by title.

        Raises:
            ValidationError: If the query is empty
        """
        ...

    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        """
        Get a single movie.

        Raises:
            ValidationError: If the ID is not positive
            NotFoundError: If the movie does not exist
        """
        ...
