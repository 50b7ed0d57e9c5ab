"""
Favorite repository for database access.

Encapsulates all Supabase queries and data mapping for the favorites table.
The table carries UNIQUE (user_id, tmdb_id, media_type); that constraint,
not any pre-check, is what keeps duplicates out.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.exceptions import DuplicateRecordError
from shared.repository import BaseRepository, is_unique_violation
from .models import Favorite, MediaType


class FavoriteRepository(BaseRepository[Favorite]):
    """
    Repository for favorite data access.

    Every query is scoped by user_id.
    """

    table_name = "favorites"

    def list_for_user(self, user_id: str) -> list[Favorite]:
        """Get all favorites for a user, most recent first."""
        result = (
            self._table()
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_favorite(row) for row in result.data]

    def find(self, user_id: str, tmdb_id: int, media_type: MediaType) -> Optional[Favorite]:
        """Look up a favorite by its unique key."""
        result = (
            self._table()
            .select("*")
            .eq("user_id", user_id)
            .eq("tmdb_id", tmdb_id)
            .eq("media_type", media_type.value)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_favorite(result.data[0])

    def create(self, user_id: str, data: dict[str, Any]) -> Favorite:
        """
        Insert a favorite for a user.

        Args:
            user_id: Owning user.
            data: Column values (tmdb_id, title, poster_path, media_type, ...).

        Raises:
            DuplicateRecordError: If the user already has this title under this media type.
        """
        row = {**data, "user_id": user_id}
        try:
            result = self._table().insert(row).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise DuplicateRecordError(self.table_name, "favorites_user_id_tmdb_id_media_type_key")
            raise
        return self._map_to_favorite(result.data[0])

    def delete(self, favorite_id: str, user_id: str) -> None:
        """Delete a favorite, only if it belongs to the given user."""
        self._table().delete().eq("id", favorite_id).eq("user_id", user_id).execute()

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_favorite(self, row: dict[str, Any]) -> Favorite:
        """Map a database row to Favorite."""
        vote_average = row.get("vote_average")
        return Favorite(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            tmdb_id=row["tmdb_id"],
            title=row["title"],
            poster_path=row.get("poster_path"),
            media_type=MediaType(row.get("media_type") or MediaType.MOVIE.value),
            vote_average=float(vote_average) if vote_average is not None else None,
            release_date=row.get("release_date"),
            created_at=row["created_at"],
        )
