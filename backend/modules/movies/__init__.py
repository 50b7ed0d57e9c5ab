"""
Movies module.

Read-only TMDB proxy: trending, popular, top rated, search and details.

Public API:
- IMovieCatalog: Interface for catalog operations
- TmdbService: TMDB-backed implementation
- Movie, MovieDetails, PaginatedMovies: Models
"""

from .interfaces import IMovieCatalog
from .models import Genre, Movie, MovieDetails, PaginatedMovies, ProductionCompany
from .service import TmdbService
from .exceptions import (
    InvalidMovieIdError,
    MissingSearchQueryError,
    MovieNotFoundError,
    TmdbRequestError,
    TmdbTimeoutError,
)

__all__ = [
    "IMovieCatalog",
    "TmdbService",
    "Genre",
    "Movie",
    "MovieDetails",
    "PaginatedMovies",
    "ProductionCompany",
    "InvalidMovieIdError",
    "MissingSearchQueryError",
    "MovieNotFoundError",
    "TmdbRequestError",
    "TmdbTimeoutError",
]
