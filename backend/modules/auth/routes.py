"""
Auth API endpoints.

Registration, login and profile update.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_auth_service
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UpdateUserRequest,
    UpdateUserResponse,
)

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create an account.

    Returns the public user and a bearer token.
    """
    return await service.register(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Sign in with email and password.

    The email is sent in the `username` field.
    """
    return await service.login(request)


@router.put("/update", response_model=UpdateUserResponse)
async def update_user(
    request: UpdateUserRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UpdateUserResponse:
    """Update the current user's name or avatar."""
    updated = await service.update_user(user.id, request)
    return UpdateUserResponse(user=updated)
