"""
JWT Authentication middleware.

Validates the API's bearer tokens and extracts user information.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import InvalidTokenError
from modules.auth.security import TokenService
from shared.models import AuthenticatedUser

from ..dependencies import get_token_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. A missing
    header, a malformed token and an expired token all raise the same
    InvalidTokenError.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise InvalidTokenError()

    payload = tokens.verify(credentials.credentials)
    return AuthenticatedUser(id=payload.user_id, email=payload.email)


# Type alias for cleaner route definitions
RequireAuth = Depends(get_current_user)
