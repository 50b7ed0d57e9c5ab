"""API models package."""

from .errors import ErrorResponse, AUTH_ERROR_RESPONSES

__all__ = [
    "ErrorResponse",
    "AUTH_ERROR_RESPONSES",
]
