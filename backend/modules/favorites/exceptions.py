"""
Favorites module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError

from .models import MediaType


class FavoriteAlreadyExistsError(ConflictError):
    """Raised when the user already saved this title under this media type."""

    def __init__(self, tmdb_id: int, media_type: MediaType):
        label = "TV show" if media_type == MediaType.TV else "Movie"
        super().__init__(
            f"{label} already in favorites",
            code="FAVORITE_ALREADY_EXISTS",
            details={"tmdb_id": tmdb_id, "media_type": media_type.value},
        )


class FavoriteNotFoundError(NotFoundError):
    """
    Raised when the user has no such favorite.

    Also raised when the title is saved by someone else, so callers
    cannot learn about other users' favorites.
    """

    def __init__(self, tmdb_id: int, media_type: MediaType):
        super().__init__(
            "Favorite not found",
            code="FAVORITE_NOT_FOUND",
            details={"tmdb_id": tmdb_id, "media_type": media_type.value},
        )
