"""
TMDB proxy service.

Fetches movie listings, search results and details from TMDB and
reshapes them into the stable models in .models, so clients are
insulated from upstream schema changes.
"""

import logging
from typing import Any, Optional

import httpx

from .interfaces import IMovieCatalog
from .models import Genre, Movie, MovieDetails, PaginatedMovies, ProductionCompany
from .exceptions import (
    InvalidMovieIdError,
    MissingSearchQueryError,
    MovieNotFoundError,
    TmdbRequestError,
    TmdbTimeoutError,
)

logger = logging.getLogger(__name__)

DEFAULT_TMDB_BASE_URL = "https://api.themoviedb.org/3"


class TmdbService(IMovieCatalog):
    """
    Movie catalog backed by the TMDB v3 REST API.

    Every call is a single GET with the API key as a query parameter.
    There is no caching and no retry; a request that exceeds the timeout
    raises TmdbTimeoutError.
    """

    TRENDING_PATH = "/trending/movie/week"
    POPULAR_PATH = "/movie/popular"
    TOP_RATED_PATH = "/movie/top_rated"
    SEARCH_PATH = "/search/movie"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_TMDB_BASE_URL,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the TMDB service.

        Args:
            api_key: TMDB v3 API key.
            base_url: TMDB API root.
            timeout: Per-request timeout in seconds.
            client: Pre-built client to reuse. If None, a client is
                    opened per request.
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    @property
    def is_configured(self) -> bool:
        """Check if a TMDB API key is configured."""
        return bool(self._api_key)

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    async def get_trending_movies(self, page: int = 1) -> PaginatedMovies:
        """Movies trending this week."""
        return await self._get_listing(self.TRENDING_PATH, {"page": page})

    async def get_popular_movies(self, page: int = 1) -> PaginatedMovies:
        """Currently popular movies."""
        return await self._get_listing(self.POPULAR_PATH, {"page": page})

    async def get_top_rated_movies(self, page: int = 1) -> PaginatedMovies:
        """Highest rated movies."""
        return await self._get_listing(self.TOP_RATED_PATH, {"page": page})

    async def search_movies(self, query: str, page: int = 1) -> PaginatedMovies:
        """Search movies by title."""
        if not query or not query.strip():
            raise MissingSearchQueryError()
        return await self._get_listing(self.SEARCH_PATH, {"query": query.strip(), "page": page})

    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        """Get a single movie with genres, runtime, budget and so on."""
        if movie_id <= 0:
            raise InvalidMovieIdError(movie_id)

        try:
            data = await self._get(f"/movie/{movie_id}")
        except TmdbRequestError as e:
            if e.upstream_status == 404:
                raise MovieNotFoundError(movie_id)
            raise

        if data.get("id") is None:
            raise TmdbRequestError("movie payload without id")
        try:
            return self._map_to_movie_details(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Unusable TMDB payload for movie {movie_id}: {e}")
            raise TmdbRequestError("unexpected response shape")

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------

    async def _get_listing(self, path: str, params: dict[str, Any]) -> PaginatedMovies:
        data = await self._get(path, params)
        try:
            return PaginatedMovies(
                results=[
                    self._map_to_movie(item)
                    for item in data.get("results") or []
                    if isinstance(item, dict) and item.get("id") is not None
                ],
                page=data.get("page", params.get("page", 1)),
                total_pages=data.get("total_pages", 0),
                total_results=data.get("total_results", 0),
            )
        except (TypeError, ValueError) as e:
            logger.warning(f"Unusable TMDB listing from {path}: {e}")
            raise TmdbRequestError("unexpected response shape")

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> dict:
        """
        GET a TMDB path and return the decoded JSON body.

        Raises:
            TmdbRequestError: On a non-2xx status, a transport error,
                              or a missing API key.
            TmdbTimeoutError: If TMDB does not answer in time.
        """
        if not self.is_configured:
            raise TmdbRequestError("API key not configured")

        query = {"api_key": self._api_key, **(params or {})}

        try:
            if self._client is not None:
                response = await self._client.get(path, params=query)
            else:
                async with httpx.AsyncClient(
                    base_url=self._base_url,
                    timeout=self._timeout,
                ) as client:
                    response = await client.get(path, params=query)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException:
            logger.warning(f"TMDB request to {path} timed out after {self._timeout}s")
            raise TmdbTimeoutError(path, self._timeout)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status != 404:
                logger.warning(f"TMDB request to {path} failed with status {status}")
            raise TmdbRequestError(f"status {status}", status_code=status)
        except httpx.HTTPError as e:
            logger.warning(f"TMDB request to {path} failed: {e}")
            raise TmdbRequestError(str(e))
        except ValueError:
            logger.warning(f"TMDB returned a non-JSON body for {path}")
            raise TmdbRequestError("invalid JSON")

        if not isinstance(payload, dict):
            raise TmdbRequestError("unexpected response shape")
        return payload

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_movie(self, movie: dict[str, Any]) -> Movie:
        """Project a TMDB movie onto Movie."""
        return Movie(**self._base_fields(movie))

    def _map_to_movie_details(self, movie: dict[str, Any]) -> MovieDetails:
        """Project a TMDB movie detail payload onto MovieDetails."""
        return MovieDetails(
            **self._base_fields(movie),
            genres=[Genre(id=g["id"], name=g["name"]) for g in movie.get("genres") or []],
            runtime=movie.get("runtime") or 0,
            tagline=movie.get("tagline") or "",
            budget=movie.get("budget") or 0,
            revenue=movie.get("revenue") or 0,
            popularity=movie.get("popularity") or 0,
            production_companies=[
                ProductionCompany(id=c["id"], name=c["name"], logo_path=c.get("logo_path"))
                for c in movie.get("production_companies") or []
            ],
        )

    @staticmethod
    def _base_fields(movie: dict[str, Any]) -> dict[str, Any]:
        return {
            "id": movie["id"],
            "title": movie.get("title") or "",
            "overview": movie.get("overview") or "",
            "poster_path": movie.get("poster_path"),
            "backdrop_path": movie.get("backdrop_path"),
            "vote_average": movie.get("vote_average") or 0,
            "vote_count": movie.get("vote_count") or 0,
            "release_date": movie.get("release_date") or "",
        }
