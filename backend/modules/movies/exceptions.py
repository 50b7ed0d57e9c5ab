"""
Movie catalog exceptions.
"""

from shared.exceptions import (
    ExternalServiceError,
    NotFoundError,
    UpstreamTimeoutError,
    ValidationError,
)

TMDB_SERVICE = "tmdb"


class InvalidMovieIdError(ValidationError):
    """Raised when a movie ID is not a positive integer."""

    def __init__(self, movie_id: object):
        super().__init__(
            "Invalid movie ID",
            code="INVALID_MOVIE_ID",
            details={"movie_id": str(movie_id)},
        )


class MissingSearchQueryError(ValidationError):
    """Raised when a search is attempted without a query."""

    def __init__(self):
        super().__init__("Search query is required", code="MISSING_QUERY")


class MovieNotFoundError(NotFoundError):
    """Raised when TMDB has no movie with the requested ID."""

    def __init__(self, movie_id: int):
        super().__init__(
            "Movie not found",
            code="MOVIE_NOT_FOUND",
            details={"movie_id": movie_id},
        )


class TmdbRequestError(ExternalServiceError):
    """Raised when TMDB answers with an error or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            f"TMDB request failed: {message}",
            service=TMDB_SERVICE,
            code="TMDB_REQUEST_FAILED",
            details={"upstream_status": status_code},
        )
        self.upstream_status = status_code


class TmdbTimeoutError(UpstreamTimeoutError):
    """Raised when TMDB does not answer within the configured timeout."""

    def __init__(self, path: str, timeout: float):
        super().__init__(
            "TMDB did not respond in time",
            service=TMDB_SERVICE,
            code="TMDB_TIMEOUT",
            details={"path": path, "timeout_seconds": timeout},
        )
