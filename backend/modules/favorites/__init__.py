"""
Favorites module.

Per-user saved movies and TV shows.

Public API:
- IFavoritesService: Interface for favorites operations
- Favorite, AddFavoriteRequest, MediaType: Models
- FavoriteAlreadyExistsError, FavoriteNotFoundError: Exceptions
"""

from .interfaces import IFavoritesService, IFavoriteRepository
from .models import AddFavoriteRequest, Favorite, FavoriteCheckResponse, MediaType
from .exceptions import FavoriteAlreadyExistsError, FavoriteNotFoundError

__all__ = [
    # Interfaces
    "IFavoritesService",
    "IFavoriteRepository",
    # Models
    "AddFavoriteRequest",
    "Favorite",
    "FavoriteCheckResponse",
    "MediaType",
    # Exceptions
    "FavoriteAlreadyExistsError",
    "FavoriteNotFoundError",
]
