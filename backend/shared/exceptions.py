"""
Base exception classes for the Streambox backend.

Each module should define its own exceptions that inherit from these bases.
Every exception carries the HTTP status it maps to, so the API layer can
convert any of them into a response in one place.
"""

from typing import Optional, Any


class StreamboxError(Exception):
    """
    Base exception for all Streambox errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging and API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(StreamboxError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(StreamboxError):
    """Authentication failed (bad credentials, or missing/invalid token)."""

    status_code = 401


class ConflictError(StreamboxError):
    """
    Resource already exists.

    Reported as 400 rather than 409 to match what existing clients expect.
    """

    status_code = 400


class DuplicateRecordError(ConflictError):
    """Raised by repositories when the database rejects a row on a unique constraint."""

    def __init__(self, table: str, constraint: Optional[str] = None):
        super().__init__(
            f"Duplicate record in {table}",
            code="DUPLICATE_RECORD",
            details={"table": table, "constraint": constraint},
        )


class NotFoundError(StreamboxError):
    """Resource not found (or not owned by the caller)."""

    status_code = 404


class ExternalServiceError(StreamboxError):
    """Error communicating with an external service."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class UpstreamTimeoutError(ExternalServiceError):
    """An external service did not answer within the configured timeout."""

    status_code = 504
