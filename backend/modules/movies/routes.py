"""
Movie API endpoints.

Public, unauthenticated proxies over the movie catalog.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_movie_catalog

from .interfaces import IMovieCatalog
from .models import MovieDetails, PaginatedMovies
from .exceptions import InvalidMovieIdError

router = APIRouter()

PageQuery = Query(default=None, description="Page number (1-indexed)")


def parse_page(raw: Optional[str]) -> int:
    """Read the page number leniently: anything missing, non-numeric or below 1 is page 1."""
    try:
        page = int(raw) if raw is not None else 1
    except ValueError:
        return 1
    return page if page >= 1 else 1


@router.get("/trending", response_model=PaginatedMovies)
async def get_trending_movies(
    page: Optional[str] = PageQuery,
    catalog: IMovieCatalog = Depends(get_movie_catalog),
) -> PaginatedMovies:
    """Movies trending this week."""
    return await catalog.get_trending_movies(parse_page(page))


@router.get("/popular", response_model=PaginatedMovies)
async def get_popular_movies(
    page: Optional[str] = PageQuery,
    catalog: IMovieCatalog = Depends(get_movie_catalog),
) -> PaginatedMovies:
    """Currently popular movies."""
    return await catalog.get_popular_movies(parse_page(page))


@router.get("/top-rated", response_model=PaginatedMovies)
async def get_top_rated_movies(
    page: Optional[str] = PageQuery,
    catalog: IMovieCatalog = Depends(get_movie_catalog),
) -> PaginatedMovies:
    """Highest rated movies."""
    return await catalog.get_top_rated_movies(parse_page(page))


@router.get("/search", response_model=PaginatedMovies)
async def search_movies(
    q: Optional[str] = Query(default=None, description="Search text"),
    page: Optional[str] = PageQuery,
    catalog: IMovieCatalog = Depends(get_movie_catalog),
) -> PaginatedMovies:
    """Search movies by title. `q` is required."""
    return await catalog.search_movies(q or "", parse_page(page))


@router.get("/{movie_id}", response_model=MovieDetails)
async def get_movie_details(
    movie_id: str,
    catalog: IMovieCatalog = Depends(get_movie_catalog),
) -> MovieDetails:
    """Get a single movie by TMDB ID."""
    try:
        parsed_id = int(movie_id)
    except ValueError:
        raise InvalidMovieIdError(movie_id)
    return await catalog.get_movie_details(parsed_id)
