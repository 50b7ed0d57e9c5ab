"""
Favorites API endpoints.

All endpoints require a bearer token and only ever touch the caller's rows.
"""

from fastapi import APIRouter, Depends, Query, Response

from api.middleware.auth import get_current_user
from api.dependencies import get_favorites_service
from api.models.errors import AUTH_ERROR_RESPONSES
from shared.models import AuthenticatedUser

from .interfaces import IFavoritesService
from .models import AddFavoriteRequest, Favorite, FavoriteCheckResponse, MediaType

router = APIRouter(responses=AUTH_ERROR_RESPONSES)


@router.get("", response_model=list[Favorite])
async def get_user_favorites(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFavoritesService = Depends(get_favorites_service),
) -> list[Favorite]:
    """List the current user's favorites, most recent first."""
    return await service.get_user_favorites(user.id)


@router.post("", response_model=Favorite, status_code=201)
async def add_favorite(
    request: AddFavoriteRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFavoritesService = Depends(get_favorites_service),
) -> Favorite:
    """
    Save a movie or TV show.

    Saving the same title twice under the same media type returns 400.
    """
    return await service.add_favorite(user.id, request)


@router.get("/{tmdb_id}/check", response_model=FavoriteCheckResponse)
async def check_is_favorite(
    tmdb_id: int,
    media_type: MediaType = Query(default=MediaType.MOVIE, alias="mediaType"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFavoritesService = Depends(get_favorites_service),
) -> FavoriteCheckResponse:
    """Check whether the current user saved a title."""
    is_favorite = await service.is_favorite(user.id, tmdb_id, media_type)
    return FavoriteCheckResponse(is_favorite=is_favorite)


@router.delete("/{tmdb_id}", status_code=204, response_class=Response)
async def remove_favorite(
    tmdb_id: int,
    media_type: MediaType = Query(default=MediaType.MOVIE, alias="mediaType"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IFavoritesService = Depends(get_favorites_service),
) -> None:
    """Remove a title from the current user's favorites."""
    await service.remove_favorite(user.id, tmdb_id, media_type)
