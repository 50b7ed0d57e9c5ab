"""
Authentication module exceptions.

These exceptions are raised by the auth module and converted into HTTP
responses by the API error handlers.
"""

from shared.exceptions import (
    StreamboxError,
    AuthenticationError,
    ConflictError,
    NotFoundError,
)


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    Unknown email and wrong password share this message so callers
    cannot probe which accounts exist.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is missing, malformed, wrongly signed or expired."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering with an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "User with this email already exists",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )


class UserNotFoundError(NotFoundError):
    """Raised when the authenticated user no longer exists in the database."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class AuthConfigurationError(StreamboxError):
    """Raised when token signing is attempted without a configured secret."""

    def __init__(self, message: str = "Server authentication not configured"):
        super().__init__(message, code="AUTH_NOT_CONFIGURED")
