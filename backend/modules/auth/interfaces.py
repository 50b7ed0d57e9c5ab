"""
Authentication module interface.

Other modules and the API layer should depend on these protocols, not the
concrete implementations. This enables testing with in-memory doubles.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from .models import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UpdateUserRequest,
    UserPublic,
    UserRecord,
)


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Create an account and sign the user in.

        Raises:
            ValidationError: If a required field is missing or malformed
            ConflictError: If the email is already registered
        """
        ...

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Authenticate with email (sent as `username`) and password.

        Raises:
            ValidationError: If a field is missing
            AuthenticationError: If the credentials do not match an account
        """
        ...

    async def update_user(
        self,
        user_id: Optional[str],
        request: UpdateUserRequest,
    ) -> UserPublic:
        """
        Apply a partial profile update for the authenticated user.

        Raises:
            AuthenticationError: If no user ID was supplied
            NotFoundError: If the user no longer exists
        """
        ...


@runtime_checkable
class IUserRepository(Protocol):
    """Storage contract for users."""

    def get_by_id(self, user_id: str) -> Optional[UserRecord]: ...

    def get_by_email(self, email: str) -> Optional[UserRecord]: ...

    def create(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        username: Optional[str] = None,
    ) -> UserRecord: ...

    def update(self, user_id: str, changes: dict[str, Any]) -> Optional[UserRecord]: ...
