"""
Movie catalog data models.

Stable projections of TMDB payloads. Field names follow TMDB's snake_case
so clients can share types with TMDB responses they fetch directly.
"""

from typing import Optional
from pydantic import BaseModel, Field


class Movie(BaseModel):
    """A movie as it appears in listings and search results."""

    id: int
    title: str = ""
    overview: str = ""
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    vote_average: float = 0.0
    vote_count: int = 0
    release_date: str = ""


class Genre(BaseModel):
    """TMDB genre."""

    id: int
    name: str


class ProductionCompany(BaseModel):
    """TMDB production company."""

    id: int
    name: str
    logo_path: Optional[str] = None


class MovieDetails(Movie):
    """A single movie with its detail-only fields."""

    genres: list[Genre] = Field(default_factory=list)
    runtime: int = 0
    tagline: str = ""
    budget: int = 0
    revenue: int = 0
    popularity: float = 0.0
    production_companies: list[ProductionCompany] = Field(default_factory=list)


class PaginatedMovies(BaseModel):
    """One page of a movie listing, with TMDB's pagination metadata."""

    results: list[Movie]
    page: int
    total_pages: int
    total_results: int
