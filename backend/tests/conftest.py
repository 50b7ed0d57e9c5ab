"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory repositories that enforce the same unique keys as the database
schema, real services wired to them, and a FastAPI app using those services.
"""

import uuid
from datetime import datetime, timezone, timedelta
from typing import Any, Optional

import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_auth_service,
    get_favorites_service,
    get_movie_catalog,
    get_token_service,
    reset_container,
)
from shared.config import get_settings
from shared.exceptions import DuplicateRecordError
from modules.auth.models import UserRecord
from modules.auth.security import PasswordHasher, TokenService
from modules.auth.service import AuthService
from modules.favorites.models import Favorite, MediaType
from modules.favorites.service import FavoritesService


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"


class InMemoryUserRepository:
    """User storage double with a unique email constraint."""

    def __init__(self) -> None:
        self.rows: dict[str, UserRecord] = {}

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self.rows.get(user_id)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self.rows.values() if u.email == email), None)

    def create(
        self,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        username: Optional[str] = None,
    ) -> UserRecord:
        if self.get_by_email(email) is not None:
            raise DuplicateRecordError("users", "users_email_key")
        now = datetime.now(timezone.utc)
        user = UserRecord(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            username=username,
            created_at=now,
            updated_at=now,
        )
        self.rows[user.id] = user
        return user

    def update(self, user_id: str, changes: dict[str, Any]) -> Optional[UserRecord]:
        user = self.rows.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update={**changes, "updated_at": datetime.now(timezone.utc)})
        self.rows[user_id] = updated
        return updated


class InMemoryFavoriteRepository:
    """Favorite storage double with UNIQUE (user_id, tmdb_id, media_type)."""

    def __init__(self) -> None:
        self.rows: list[Favorite] = []
        self._clock = datetime.now(timezone.utc)

    def list_for_user(self, user_id: str) -> list[Favorite]:
        owned = [f for f in self.rows if f.user_id == user_id]
        return sorted(owned, key=lambda f: f.created_at, reverse=True)

    def find(self, user_id: str, tmdb_id: int, media_type: MediaType) -> Optional[Favorite]:
        return next(
            (
                f for f in self.rows
                if f.user_id == user_id and f.tmdb_id == tmdb_id and f.media_type == media_type
            ),
            None,
        )

    def create(self, user_id: str, data: dict[str, Any]) -> Favorite:
        if self.find(user_id, data["tmdb_id"], MediaType(data["media_type"])) is not None:
            raise DuplicateRecordError("favorites")
        # Strictly increasing timestamps keep newest-first ordering deterministic
        self._clock += timedelta(milliseconds=1)
        favorite = Favorite(
            id=str(uuid.uuid4()),
            user_id=user_id,
            created_at=self._clock,
            **data,
        )
        self.rows.append(favorite)
        return favorite

    def delete(self, favorite_id: str, user_id: str) -> None:
        self.rows = [
            f for f in self.rows
            if not (f.id == favorite_id and f.user_id == user_id)
        ]


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "userId": user_id,
        "email": email,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and settings cache around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def favorite_repository() -> InMemoryFavoriteRepository:
    return InMemoryFavoriteRepository()


@pytest.fixture
def password_hasher() -> PasswordHasher:
    """bcrypt at its minimum cost so tests stay fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret=TEST_JWT_SECRET)


@pytest.fixture
def auth_service(user_repository, password_hasher, token_service) -> AuthService:
    return AuthService(users=user_repository, hasher=password_hasher, tokens=token_service)


@pytest.fixture
def favorites_service(favorite_repository) -> FavoritesService:
    return FavoritesService(favorite_repository)


@pytest.fixture
def app(auth_service, favorites_service, token_service):
    """Create a fresh app wired to the in-memory services."""
    app = create_app()
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_favorites_service] = lambda: favorites_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def override_catalog(app):
    """Install a movie catalog double: `override_catalog(mock)`."""
    def install(catalog):
        app.dependency_overrides[get_movie_catalog] = lambda: catalog
        return catalog
    return install


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def register_user(client):
    """Register through the API and return (user, headers)."""
    def register(email: str = "a@b.com", password: str = "pw123456", **extra):
        body = {
            "email": email,
            "password": password,
            "firstName": extra.pop("firstName", "A"),
            "lastName": extra.pop("lastName", "B"),
            **extra,
        }
        response = client.post("/api/auth/register", json=body)
        assert response.status_code == 201, response.json()
        data = response.json()
        return data["user"], {"Authorization": f"Bearer {data['token']}"}
    return register
