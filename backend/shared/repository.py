"""
Repository base for Supabase-backed tables.

Repositories own every query against their table and return pydantic
models, never raw rows. Constraint violations reported by PostgREST are
translated here so services only ever see domain exceptions.
"""

from typing import TypeVar, Generic
from postgrest.exceptions import APIError
from supabase import Client


T = TypeVar("T")

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: APIError) -> bool:
    """Check whether a PostgREST error was caused by a unique constraint."""
    return str(getattr(error, "code", "")) == UNIQUE_VIOLATION


class BaseRepository(Generic[T]):
    """
    Base class for table repositories.

    Subclasses set `table_name` and build queries with `self._table()`:

        class FavoriteRepository(BaseRepository[Favorite]):
            table_name = "favorites"

            def find(self, user_id: str, tmdb_id: int) -> Optional[Favorite]:
                result = (
                    self._table().select("*")
                    .eq("user_id", user_id).eq("tmdb_id", tmdb_id)
                    .limit(1).execute()
                )
                return self._map_to_favorite(result.data[0]) if result.data else None
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        self._db = db

    def _table(self):
        """Start a query builder on this repository's table."""
        return self._db.table(self.table_name)
