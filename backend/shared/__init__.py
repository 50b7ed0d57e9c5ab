"""
Shared infrastructure for the Streambox backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository and constraint helpers

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    StreamboxError,
    ValidationError,
    AuthenticationError,
    ConflictError,
    DuplicateRecordError,
    NotFoundError,
    ExternalServiceError,
    UpstreamTimeoutError,
)
from .models import AuthenticatedUser, CamelModel

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "StreamboxError",
    "ValidationError",
    "AuthenticationError",
    "ConflictError",
    "DuplicateRecordError",
    "NotFoundError",
    "ExternalServiceError",
    "UpstreamTimeoutError",
    "AuthenticatedUser",
    "CamelModel",
]
