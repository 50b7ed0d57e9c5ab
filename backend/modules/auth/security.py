"""
Password hashing and bearer token primitives.

PasswordHasher wraps bcrypt; TokenService signs and verifies the API's
HS256 JWTs. Both are stateless apart from their configuration.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from .exceptions import AuthConfigurationError, InvalidTokenError
from .models import TokenPayload

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """
    One-way adaptive password hashing.

    Hashing and verification are CPU-bound, so both run in a
    worker thread to keep the event loop responsive.
    """

    def __init__(self, rounds: int = 10):
        self._rounds = rounds
        self._dummy_hash: Optional[bytes] = None

    @staticmethod
    def is_too_long(password: str) -> bool:
        """Check whether bcrypt would have to truncate the password."""
        return len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def _verify_sync(self, password: str, hashed: str) -> bool:
        encoded = password.encode("utf-8")
        try:
            if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
                # Still pay for one check so over-long input takes the usual time
                bcrypt.checkpw(encoded[:BCRYPT_MAX_PASSWORD_BYTES], hashed.encode("utf-8"))
                return False
            return bcrypt.checkpw(encoded, hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            logger.warning("Stored password hash is malformed")
            return False

    async def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, hashed: str) -> bool:
        """Check a password against a stored hash."""
        return await asyncio.to_thread(self._verify_sync, password, hashed)

    async def burn(self, password: str) -> None:
        """
        Spend one verification's worth of time without a real hash.

        Used when the account does not exist, so a failed login takes
        the same time either way.
        """
        if self._dummy_hash is None:
            self._dummy_hash = await asyncio.to_thread(
                bcrypt.hashpw, b"streambox", bcrypt.gensalt(rounds=self._rounds)
            )
        await self.verify(password, self._dummy_hash.decode("utf-8"))


class TokenService:
    """Issues and verifies the API's bearer tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(days=7),
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue(self, user_id: str, email: str) -> str:
        """
        Sign a token for a user.

        Args:
            user_id: ID of the authenticated user
            email: The user's email

        Returns:
            Compact JWT string

        Raises:
            AuthConfigurationError: If no signing secret is configured
        """
        if not self._secret:
            raise AuthConfigurationError()

        now = datetime.now(timezone.utc)
        payload = {
            "userId": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenPayload:
        """
        Verify a token's signature and expiry.

        Every failure raises the same InvalidTokenError; the reason is only logged.
        """
        if not token:
            raise InvalidTokenError()
        if not self._secret:
            raise AuthConfigurationError()

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
            return TokenPayload(**claims)
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            raise InvalidTokenError()
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected invalid token: {e}")
            raise InvalidTokenError()
        except ValueError as e:
            # Signature was fine but the claims do not match TokenPayload
            logger.debug(f"Rejected token with unexpected claims: {e}")
            raise InvalidTokenError()
