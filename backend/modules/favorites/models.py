"""
Favorites module data models.

A favorite is a TMDB title (movie or TV show) saved by a user. The
(user, tmdb_id, media_type) triple is unique.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import Field

from shared.models import CamelModel


class MediaType(str, Enum):
    """Kind of TMDB title."""

    MOVIE = "movie"
    TV = "tv"


class Favorite(CamelModel):
    """A saved title as returned to clients."""

    id: str = Field(..., description="Favorite ID")
    user_id: str = Field(..., description="Owning user")
    tmdb_id: int = Field(..., description="TMDB ID of the title")
    title: str
    poster_path: Optional[str] = None
    media_type: MediaType = MediaType.MOVIE
    vote_average: Optional[float] = None
    release_date: Optional[str] = None
    created_at: datetime


class AddFavoriteRequest(CamelModel):
    """
    Payload for saving a title.

    `posterPath` must be present in the payload but may be null.
    """

    tmdb_id: Optional[int] = None
    title: Optional[str] = None
    poster_path: Optional[str] = None
    media_type: Optional[MediaType] = MediaType.MOVIE
    vote_average: Optional[float] = None
    release_date: Optional[str] = None


class FavoriteCheckResponse(CamelModel):
    """Result of a membership check."""

    is_favorite: bool
