"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import CamelModel


class UserRecord(BaseModel):
    """
    A row from the users table.

    Holds the password hash, so it must never be returned from an endpoint.
    Use to_public() for anything that leaves the service.
    """

    id: str
    email: str
    password_hash: str
    first_name: str
    last_name: str
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_public(self) -> "UserPublic":
        """Project the record onto the fields clients are allowed to see."""
        return UserPublic(
            id=self.id,
            username=self.username or self.email.split("@")[0],
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            image=self.avatar_url,
        )


class UserPublic(CamelModel):
    """Public projection of a user."""

    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username, or the local part of the email")
    email: str = Field(..., description="Email address")
    first_name: str
    last_name: str
    image: Optional[str] = Field(None, description="Avatar URL")


class RegisterRequest(CamelModel):
    """
    Registration payload.

    Every field is optional at the schema level; presence and format are
    checked by AuthService so that direct callers get the same errors.
    """

    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None


class LoginRequest(CamelModel):
    """Login payload. `username` holds the account email."""

    username: Optional[str] = None
    password: Optional[str] = None


class UpdateUserRequest(CamelModel):
    """Partial profile update."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar_url: Optional[str] = None


class AuthResponse(BaseModel):
    """Returned by register and login."""

    user: UserPublic
    token: str


class UpdateUserResponse(BaseModel):
    """Returned by profile update."""

    user: UserPublic


class TokenPayload(CamelModel):
    """Decoded bearer token claims."""

    user_id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")
