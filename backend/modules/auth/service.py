"""
Authentication service implementation.

Registers and authenticates users, issues bearer tokens and applies
profile updates.
"""

import logging
import re
from typing import Optional, Any

from shared.exceptions import DuplicateRecordError, ValidationError

from .interfaces import IAuthService, IUserRepository
from .models import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UpdateUserRequest,
    UserPublic,
    UserRecord,
)
from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserNotFoundError,
)
from .security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Users are stored through IUserRepository; passwords go through
    PasswordHasher and sessions are stateless JWTs from TokenService.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """Create an account and return it with a fresh token."""
        missing = [
            name
            for name, value in (
                ("email", request.email),
                ("password", request.password),
                ("firstName", request.first_name),
                ("lastName", request.last_name),
            )
            if _is_blank(value)
        ]
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}",
                code="MISSING_FIELDS",
                details={"fields": missing},
            )

        email = request.email.strip()
        if not EMAIL_PATTERN.match(email):
            raise ValidationError("Invalid email format", code="INVALID_EMAIL")

        if self._hasher.is_too_long(request.password):
            raise ValidationError(
                "Password must be at most 72 bytes",
                code="PASSWORD_TOO_LONG",
            )

        if self._users.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        password_hash = await self._hasher.hash(request.password)

        try:
            user = self._users.create(
                email=email,
                password_hash=password_hash,
                first_name=request.first_name.strip(),
                last_name=request.last_name.strip(),
                username=None if _is_blank(request.username) else request.username.strip(),
            )
        except DuplicateRecordError:
            # Lost a race with a concurrent registration for the same email
            raise EmailAlreadyRegisteredError(email)

        logger.info(f"Registered user {user.id}")
        return self._build_response(user)

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Authenticate and return the user with a fresh token.

        The `username` field is looked up in the email column.
        """
        if _is_blank(request.username) or not request.password:
            raise ValidationError(
                "Username and password are required",
                code="MISSING_FIELDS",
            )

        user = self._users.get_by_email(request.username.strip())
        if user is None:
            await self._hasher.burn(request.password)
            logger.info("Login failed: unknown account")
            raise InvalidCredentialsError()

        if not await self._hasher.verify(request.password, user.password_hash):
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in")
        return self._build_response(user)

    async def update_user(
        self,
        user_id: Optional[str],
        request: UpdateUserRequest,
    ) -> UserPublic:
        """Apply the supplied profile fields and return the new projection."""
        if not user_id:
            raise InvalidTokenError()

        changes: dict[str, Any] = {}
        for field, column in (("first_name", "first_name"), ("last_name", "last_name")):
            value = getattr(request, field)
            if value is None:
                continue
            if not value.strip():
                raise ValidationError(f"{field} cannot be blank", code="BLANK_FIELD")
            changes[column] = value.strip()
        if "avatar_url" in request.model_fields_set:
            changes["avatar_url"] = request.avatar_url

        if changes:
            user = self._users.update(user_id, changes)
        else:
            user = self._users.get_by_id(user_id)

        if user is None:
            raise UserNotFoundError(user_id)

        logger.info(f"Updated profile for user {user.id}: {sorted(changes)}")
        return user.to_public()

    def _build_response(self, user: UserRecord) -> AuthResponse:
        token = self._tokens.issue(user.id, user.email)
        return AuthResponse(user=user.to_public(), token=token)
