"""
Tests for the movie endpoints with a mocked catalog.
"""

import pytest
from unittest.mock import AsyncMock

from modules.movies.exceptions import MovieNotFoundError, TmdbRequestError, TmdbTimeoutError
from modules.movies.models import Movie, MovieDetails, PaginatedMovies

PAGE = PaginatedMovies(
    results=[Movie(id=550, title="Fight Club", poster_path="/p.jpg")],
    page=1,
    total_pages=1,
    total_results=1,
)


@pytest.fixture
def catalog(override_catalog):
    mock = AsyncMock()
    for method in (
        "get_trending_movies",
        "get_popular_movies",
        "get_top_rated_movies",
        "search_movies",
    ):
        getattr(mock, method).return_value = PAGE
    mock.get_movie_details.return_value = MovieDetails(id=550, title="Fight Club", runtime=139)
    return override_catalog(mock)


class TestListingEndpoints:
    @pytest.mark.parametrize(
        "path, method",
        [
            ("/api/movies/trending", "get_trending_movies"),
            ("/api/movies/popular", "get_popular_movies"),
            ("/api/movies/top-rated", "get_top_rated_movies"),
        ],
    )
    def test_listing(self, client, catalog, path, method):
        """Listings are public and default to page 1."""
        response = client.get(path)

        assert response.status_code == 200
        data = response.json()
        assert data["results"][0]["title"] == "Fight Club"
        assert data["total_pages"] == 1
        getattr(catalog, method).assert_awaited_once_with(1)

    def test_page_parameter(self, client, catalog):
        """page is forwarded."""
        client.get("/api/movies/popular?page=3")
        catalog.get_popular_movies.assert_awaited_once_with(3)

    @pytest.mark.parametrize("page", ["0", "-1", "abc", "", "2.5"])
    def test_unusable_page_falls_back_to_first(self, client, catalog, page):
        """A page that is not a positive integer means page 1."""
        response = client.get(f"/api/movies/popular?page={page}")

        assert response.status_code == 200
        catalog.get_popular_movies.assert_awaited_once_with(1)

    def test_search_page_falls_back_to_first(self, client, catalog):
        """Search reads page the same way."""
        response = client.get("/api/movies/search?q=fight&page=abc")

        assert response.status_code == 200
        catalog.search_movies.assert_awaited_once_with("fight", 1)


class TestSearchEndpoint:
    def test_search(self, client, catalog):
        """q is forwarded to the catalog."""
        response = client.get("/api/movies/search?q=fight")

        assert response.status_code == 200
        catalog.search_movies.assert_awaited_once_with("fight", 1)

    def test_search_without_query(self, client, override_catalog):
        """A missing q is a 400."""
        from modules.movies.service import TmdbService

        override_catalog(TmdbService(api_key="test-key", base_url="http://tmdb.invalid/3"))

        response = client.get("/api/movies/search")

        assert response.status_code == 400
        assert response.json() == {"message": "Search query is required"}


class TestDetailsEndpoint:
    def test_details(self, client, catalog):
        """A numeric ID returns the details."""
        response = client.get("/api/movies/550")

        assert response.status_code == 200
        assert response.json()["runtime"] == 139
        catalog.get_movie_details.assert_awaited_once_with(550)

    def test_non_numeric_id(self, client, catalog):
        """A non-numeric ID is a 400 and TMDB is not called."""
        response = client.get("/api/movies/invalid")

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid movie ID"}
        catalog.get_movie_details.assert_not_awaited()

    def test_not_found(self, client, catalog):
        """Unknown movies are a 404."""
        catalog.get_movie_details.side_effect = MovieNotFoundError(999999999)

        response = client.get("/api/movies/999999999")

        assert response.status_code == 404
        assert response.json() == {"message": "Movie not found"}


class TestUpstreamErrors:
    def test_upstream_failure(self, client, catalog):
        """TMDB errors surface as 502."""
        catalog.get_popular_movies.side_effect = TmdbRequestError("status 500", status_code=500)

        response = client.get("/api/movies/popular")

        assert response.status_code == 502
        assert "message" in response.json()

    def test_upstream_timeout(self, client, catalog):
        """TMDB timeouts surface as 504."""
        catalog.get_trending_movies.side_effect = TmdbTimeoutError("/trending/movie/week", 10.0)

        response = client.get("/api/movies/trending")

        assert response.status_code == 504


class TestMalformedUpstream:
    def test_non_json_upstream_is_502(self, client, override_catalog):
        """A non-JSON TMDB body reaches the caller as 502, not 500."""
        import httpx
        from modules.movies.service import TmdbService

        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>gateway</html>"))
        override_catalog(
            TmdbService(
                api_key="test-key",
                base_url="http://tmdb.test/3",
                client=httpx.AsyncClient(base_url="http://tmdb.test/3", transport=transport),
            )
        )

        response = client.get("/api/movies/popular")

        assert response.status_code == 502
        assert response.json()["message"].startswith("TMDB request failed")
