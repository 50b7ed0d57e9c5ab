"""
Favorites service implementation.

Manages each user's set of saved titles.
"""

import logging

from shared.exceptions import DuplicateRecordError, ValidationError

from .interfaces import IFavoritesService, IFavoriteRepository
from .models import AddFavoriteRequest, Favorite, MediaType
from .exceptions import FavoriteAlreadyExistsError, FavoriteNotFoundError

logger = logging.getLogger(__name__)


class FavoritesService(IFavoritesService):
    """
    Favorites service backed by IFavoriteRepository.

    Uniqueness of (user, tmdb_id, media_type) is enforced by the storage
    layer. The lookup before insert only gives a quick answer for the
    common case; a concurrent duplicate is caught on insert.
    """

    def __init__(self, repository: IFavoriteRepository):
        self._repository = repository

    async def get_user_favorites(self, user_id: str) -> list[Favorite]:
        """List the user's favorites, newest first."""
        return self._repository.list_for_user(user_id)

    async def add_favorite(self, user_id: str, request: AddFavoriteRequest) -> Favorite:
        """Save a title for the user."""
        missing = []
        if request.tmdb_id is None:
            missing.append("tmdbId")
        if request.title is None or not request.title.strip():
            missing.append("title")
        if "poster_path" not in request.model_fields_set:
            missing.append("posterPath")
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}",
                code="MISSING_FIELDS",
                details={"fields": missing},
            )
        if request.tmdb_id <= 0:
            raise ValidationError("tmdbId must be a positive integer", code="INVALID_TMDB_ID")

        media_type = request.media_type or MediaType.MOVIE

        if self._repository.find(user_id, request.tmdb_id, media_type) is not None:
            raise FavoriteAlreadyExistsError(request.tmdb_id, media_type)

        data = {
            "tmdb_id": request.tmdb_id,
            "title": request.title,
            "poster_path": request.poster_path,
            "media_type": media_type.value,
            "vote_average": request.vote_average,
            "release_date": request.release_date,
        }
        try:
            favorite = self._repository.create(user_id, data)
        except DuplicateRecordError:
            raise FavoriteAlreadyExistsError(request.tmdb_id, media_type)

        logger.info(f"User {user_id} added {media_type.value} {request.tmdb_id} to favorites")
        return favorite

    async def remove_favorite(
        self,
        user_id: str,
        tmdb_id: int,
        media_type: MediaType = MediaType.MOVIE,
    ) -> None:
        """Delete one of the user's favorites."""
        favorite = self._repository.find(user_id, tmdb_id, media_type)
        if favorite is None:
            raise FavoriteNotFoundError(tmdb_id, media_type)

        self._repository.delete(favorite.id, user_id)
        logger.info(f"User {user_id} removed {media_type.value} {tmdb_id} from favorites")

    async def is_favorite(
        self,
        user_id: str,
        tmdb_id: int,
        media_type: MediaType = MediaType.MOVIE,
    ) -> bool:
        """Check whether the user saved this title."""
        return self._repository.find(user_id, tmdb_id, media_type) is not None
