"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.exceptions import DuplicateRecordError
from shared.repository import BaseRepository, is_unique_violation
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    The email column carries a UNIQUE constraint; inserts that violate it
    raise DuplicateRecordError.
    """

    table_name = "users"

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Get a user by ID, or None if it does not exist."""
        result = self._table().select("*").eq("id", user_id).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Get a user by email, or None if no account uses it."""
        result = self._table().select("*").eq("email", email).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def create(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        username: Optional[str] = None,
    ) -> UserRecord:
        """
        Insert a new user.

        Raises:
            DuplicateRecordError: If the email is already registered.
        """
        data: dict[str, Any] = {
            "email": email,
            "password": password_hash,
            "first_name": first_name,
            "last_name": last_name,
        }
        if username:
            data["username"] = username

        try:
            result = self._table().insert(data).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise DuplicateRecordError(self.table_name, "users_email_key")
            raise
        return self._map_to_user(result.data[0])

    def update(self, user_id: str, changes: dict[str, Any]) -> Optional[UserRecord]:
        """
        Apply a partial update to a user.

        Args:
            user_id: The user's ID.
            changes: Column -> value mapping; only these columns are written.

        Returns:
            The updated user, or None if no row matched.
        """
        result = self._table().update(changes).eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_user(self, row: dict[str, Any]) -> UserRecord:
        """Map a database row to UserRecord."""
        return UserRecord(
            id=str(row["id"]),
            email=row["email"],
            password_hash=row["password"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            username=row.get("username"),
            avatar_url=row.get("avatar_url"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )
