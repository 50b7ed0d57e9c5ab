"""
Streambox API package.

Provides the FastAPI application for the Streambox movie service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
