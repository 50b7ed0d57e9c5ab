"""
Authentication module.

Handles registration, login, bearer tokens and profile updates.

Public API:
- IAuthService: Interface for auth operations
- PasswordHasher / TokenService: Credential primitives
- UserPublic, AuthResponse: Wire models
- Auth exceptions: InvalidCredentialsError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService, IUserRepository
from .models import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenPayload,
    UpdateUserRequest,
    UserPublic,
    UserRecord,
)
from .security import PasswordHasher, TokenService
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    EmailAlreadyRegisteredError,
    UserNotFoundError,
    AuthConfigurationError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    # Models
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "TokenPayload",
    "UpdateUserRequest",
    "UserPublic",
    "UserRecord",
    # Security
    "PasswordHasher",
    "TokenService",
    # Exceptions
    "InvalidCredentialsError",
    "InvalidTokenError",
    "EmailAlreadyRegisteredError",
    "UserNotFoundError",
    "AuthConfigurationError",
]
