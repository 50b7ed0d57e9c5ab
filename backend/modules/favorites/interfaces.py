"""
Favorites module interface.

The API layer depends on IFavoritesService; the service depends on
IFavoriteRepository for storage.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from .models import AddFavoriteRequest, Favorite, MediaType


@runtime_checkable
class IFavoritesService(Protocol):
    """Interface for managing a user's favorites."""

    async def get_user_favorites(self, user_id: str) -> list[Favorite]:
        """List the user's favorites, newest first."""
        ...

    async def add_favorite(self, user_id: str, request: AddFavoriteRequest) -> Favorite:
        """
        Save a title for the user.

        Raises:
            ValidationError: If tmdbId, title or posterPath is missing
            ConflictError: If the title is already saved under this media type
        """
        ...

    async def remove_favorite(
        self,
        user_id: str,
        tmdb_id: int,
        media_type: MediaType = MediaType.MOVIE,
    ) -> None:
        """
        Delete one of the user's favorites.

        Raises:
            NotFoundError: If the user has no such favorite
        """
        ...

    async def is_favorite(
        self,
        user_id: str,
        tmdb_id: int,
        media_type: MediaType = MediaType.MOVIE,
    ) -> bool:
        """Check whether the user saved this title."""
        ...


@runtime_checkable
class IFavoriteRepository(Protocol):
    """Storage contract for favorites."""

    def list_for_user(self, user_id: str) -> list[Favorite]: ...

    def find(self, user_id: str, tmdb_id: int, media_type: MediaType) -> Optional[Favorite]: ...

    def create(self, user_id: str, data: dict[str, Any]) -> Favorite: ...

    def delete(self, favorite_id: str, user_id: str) -> None: ...
