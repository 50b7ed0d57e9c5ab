"""
Tests for centralized error handling.
"""

from fastapi.testclient import TestClient

from api.app import create_app
from shared.exceptions import ExternalServiceError, NotFoundError


def make_client(exc: Exception) -> TestClient:
    app = create_app()

    @app.get("/boom")
    async def boom():
        raise exc

    return TestClient(app, raise_server_exceptions=False)


class TestErrorHandlers:
    def test_domain_error_uses_its_status(self):
        """StreamboxError subclasses map to their status with a message body."""
        response = make_client(NotFoundError("Nothing here")).get("/boom")

        assert response.status_code == 404
        assert response.json() == {"message": "Nothing here"}

    def test_external_error(self):
        """Upstream failures are 502."""
        response = make_client(ExternalServiceError("TMDB down", service="tmdb")).get("/boom")

        assert response.status_code == 502
        assert response.json() == {"message": "TMDB down"}

    def test_unexpected_error_is_hidden(self):
        """Anything else is a 500 with a generic message."""
        response = make_client(RuntimeError("secret detail")).get("/boom")

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}
        assert "secret detail" not in response.text

    def test_request_validation_is_400(self, client, auth_headers):
        """Schema errors are reported as 400 with a message."""
        response = client.get("/api/favorites/not-a-number/check", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["message"]

    def test_unknown_route(self, client):
        """Unknown paths are 404 with a message body."""
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json() == {"message": "Not Found"}

    def test_wrong_method(self, client, auth_headers):
        """Unsupported methods are 405 with a message body and the Allow header."""
        response = client.patch("/api/favorites", headers=auth_headers)

        assert response.status_code == 405
        assert response.json() == {"message": "Method Not Allowed"}
        assert "GET" in response.headers["allow"]
