"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health endpoint
responds as expected, and the cross-cutting middleware and limiter apply.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.domain.products.ports import ProductService
from app.interfaces.products.dependencies import get_product_service
from app.main import app

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status, version and service fields."""
        response = client.get("/api/health")
        body = response.json()
        assert body["status"] == "ok"
        assert body["version"] == settings.version
        assert body["product_service"] == "InMemoryProductService"

    def test_health_reports_wired_service(self) -> None:
        class StubProductService(ProductService):
            async def get(self, ctx, product_id):
                raise NotImplementedError

            async def create(self, ctx, product):
                raise NotImplementedError

            async def update(self, ctx, product_id, product):
                raise NotImplementedError

            async def delete(self, ctx, product_id):
                raise NotImplementedError

        app.dependency_overrides[get_product_service] = StubProductService
        try:
            response = client.get("/api/health")
        finally:
            app.dependency_overrides.pop(get_product_service, None)
        assert response.json()["product_service"] == "StubProductService"


class TestSecurityHeaders:
    """Tests for headers added to every response."""

    def test_security_headers_present(self) -> None:
        response = client.get("/api/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Content-Security-Policy" in response.headers

    def test_request_id_is_echoed(self) -> None:
        response = client.get("/api/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    def test_request_id_generated_when_missing(self) -> None:
        response = client.get("/api/health")
        assert response.headers["X-Request-ID"]


class TestRateLimiting:
    """Tests for the per-client request limit."""

    @pytest.fixture(autouse=True)
    def low_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "rate_limit_default", "2/minute")

    def test_requests_within_limit_pass(self) -> None:
        for _ in range(2):
            assert client.get("/api/health").status_code == 200

    def test_request_over_limit_is_429(self) -> None:
        for _ in range(2):
            client.get("/api/health")
        response = client.get("/api/health")
        assert response.status_code == 429
        assert response.json()["message"].startswith("Rate limit exceeded")

    def test_product_routes_are_limited(self) -> None:
        statuses = [client.get("/api/products/646").status_code for _ in range(3)]
        assert statuses[2] == 429
        assert set(client.get("/api/products/646").json()) == {"message"}
