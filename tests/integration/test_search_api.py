"""
Integration tests for the book search API endpoints.

These tests use a test HTTP client against the FastAPI app with the
SearchService wired to stub sources, validating the full
request → response cycle.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from booksearch.domain.search_service import SearchService


@pytest.mark.asyncio
class TestSearchEndpoint:
    """Integration tests for GET /api/search."""

    async def test_merged_results(
        self, api_client, search_service_factory, stub_source, make_record
    ):
        """Should return one grouped record with both sources."""
        service = search_service_factory(
            stub_source("flibusta.is", [make_record(source="flibusta.is", link="f/1")]),
            stub_source("royallib.com", [
                make_record(source="royallib.com", link="r/1", description="Genre: Роман"),
            ]),
        )
        client = api_client(service)

        response = await client.get("/api/search", params={"q": "Война и мир"})

        assert response.status_code == 200
        results = response.json()["results"]
        assert len(results) == 1
        assert results[0]["title"] == "War and Peace"
        assert results[0]["description"] == "Genre: Роман"
        assert results[0]["sources"] == [
            {"name": "flibusta.is", "link": "f/1"},
            {"name": "royallib.com", "link": "r/1"},
        ]

    async def test_fallback_when_nothing_found(
        self, api_client, search_service_factory, stub_source
    ):
        """Should return the demo catalog when every source is empty."""
        service = search_service_factory(*(stub_source(f"s{i}") for i in range(6)))
        client = api_client(service)

        response = await client.get("/api/search", params={"q": "Толстой"})

        assert response.status_code == 200
        results = response.json()["results"]
        assert len(results) == 12
        assert results[0]["sources"] == [{"name": "demo", "link": "#"}]

    async def test_missing_query_returns_400(self, api_client, search_service_factory):
        """Should reject a request without q."""
        client = api_client(search_service_factory())

        response = await client.get("/api/search")

        assert response.status_code == 400
        data = response.json()
        assert data["error"]
        assert data["results"] == []

    async def test_blank_query_returns_400(self, api_client, search_service_factory):
        """Should reject a whitespace-only q."""
        client = api_client(search_service_factory())

        response = await client.get("/api/search", params={"q": "   "})

        assert response.status_code == 400

    async def test_handler_fault_returns_500(self, api_client):
        """Should turn an escaping exception into a generic 500."""
        service = MagicMock(spec=SearchService)
        service.search = AsyncMock(side_effect=RuntimeError("catastrophe"))
        client = api_client(service)

        response = await client.get("/api/search", params={"q": "x"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


@pytest.mark.asyncio
class TestDownloadEndpoint:
    """Integration tests for GET /api/download/{id}."""

    async def test_download_is_pending(self, api_client, search_service_factory):
        """Should acknowledge the request without delivering anything."""
        client = api_client(search_service_factory())

        response = await client.get("/api/download/abc123")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "abc123"
        assert "development" in data["message"]


@pytest.mark.asyncio
class TestHealthCheck:
    """Integration tests for the health check endpoint."""

    async def test_health_returns_200(self, api_client, search_service_factory):
        """Should return 200 with OK status and a timestamp."""
        client = api_client(search_service_factory())

        response = await client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        assert data["timestamp"]
