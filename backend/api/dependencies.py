"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests replace the services through app.dependency_overrides.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IUserRepository
    from modules.auth.security import PasswordHasher, TokenService
    from modules.favorites.interfaces import IFavoritesService, IFavoriteRepository
    from modules.movies.interfaces import IMovieCatalog


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container; none of
    them hold per-request state. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._user_repository: "IUserRepository | None" = None
        self._favorite_repository: "IFavoriteRepository | None" = None
        self._password_hasher: "PasswordHasher | None" = None
        self._token_service: "TokenService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._favorites_service: "IFavoritesService | None" = None
        self._movie_catalog: "IMovieCatalog | None" = None

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def favorite_repository(self) -> "IFavoriteRepository":
        """Get the favorite repository instance."""
        if self._favorite_repository is None:
            from modules.favorites.repository import FavoriteRepository
            from shared.database import get_supabase_client
            self._favorite_repository = FavoriteRepository(get_supabase_client())
        return self._favorite_repository

    @property
    def password_hasher(self) -> "PasswordHasher":
        """Get the password hasher instance."""
        if self._password_hasher is None:
            from modules.auth.security import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=get_settings().bcrypt_rounds)
        return self._password_hasher

    @property
    def token_service(self) -> "TokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.security import TokenService
            settings = get_settings()
            self._token_service = TokenService(
                secret=settings.jwt_secret,
                algorithm=settings.jwt_algorithm,
                expires_in=timedelta(hours=settings.jwt_expires_in_hours),
            )
        return self._token_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=self.password_hasher,
                tokens=self.token_service,
            )
        return self._auth_service

    @property
    def favorites(self) -> "IFavoritesService":
        """Get the favorites service instance."""
        if self._favorites_service is None:
            from modules.favorites.service import FavoritesService
            self._favorites_service = FavoritesService(self.favorite_repository)
        return self._favorites_service

    @property
    def movies(self) -> "IMovieCatalog":
        """Get the TMDB-backed movie catalog."""
        if self._movie_catalog is None:
            from modules.movies.service import TmdbService
            settings = get_settings()
            self._movie_catalog = TmdbService(
                api_key=settings.tmdb_api_key,
                base_url=settings.tmdb_base_url,
                timeout=settings.tmdb_timeout_seconds,
            )
        return self._movie_catalog

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different dependencies.
        """
        self._user_repository = None
        self._favorite_repository = None
        self._password_hasher = None
        self._token_service = None
        self._auth_service = None
        self._favorites_service = None
        self._movie_catalog = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "TokenService":
    """FastAPI dependency for the token service."""
    return get_container().token_service


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_favorites_service() -> "IFavoritesService":
    """FastAPI dependency for favorites service."""
    return get_container().favorites


def get_movie_catalog() -> "IMovieCatalog":
    """FastAPI dependency for the movie catalog."""
    return get_container().movies
