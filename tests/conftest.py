"""
Shared test fixtures for the book search test suite.

Provides:
  - Async test client with the SearchService dependency overridden
  - Stub book sources
  - Raw record factory
"""

import asyncio
from typing import AsyncIterator, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from booksearch.api.dependencies import get_search_service
from booksearch.domain.aggregator import FetchOrchestrator
from booksearch.domain.models import RawRecord
from booksearch.domain.search_service import SearchService
from booksearch.infrastructure.cache.query_cache import MemoryQueryCache
from booksearch.main import app


class StubSource:
    """Book source returning canned records after an optional delay."""

    def __init__(self, name: str, records=None, delay: float = 0.0, error=None):
        self.name = name
        self.records = list(records or [])
        self.delay = delay
        self.error = error
        self.queries: list[str] = []

    async def extract(self, query: str) -> list[RawRecord]:
        self.queries.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def stub_source():
    """Provide the StubSource class for building fake book sites."""
    return StubSource


@pytest.fixture
def make_record() -> Callable[..., RawRecord]:
    """Build a RawRecord with sensible defaults."""

    def _make(
        title: str = "War and Peace",
        author: str = "Leo Tolstoy",
        description: str = "",
        source: str = "flibusta.is",
        link: str = "http://flibusta.is/b/1",
    ) -> RawRecord:
        return RawRecord(
            title=title,
            author=author,
            description=description,
            download_link=link,
            source=source,
        )

    return _make


@pytest.fixture
def memory_cache() -> MemoryQueryCache:
    return MemoryQueryCache(ttl_seconds=3600)


@pytest.fixture
def mock_cache():
    """Provide a mock QueryCache that always misses."""
    cache = MagicMock()
    cache.lookup = AsyncMock(return_value=None)
    cache.store = AsyncMock()
    return cache


@pytest.fixture
def search_service_factory(memory_cache):
    """Build a SearchService over the given stub sources."""

    def _build(*sources, cache=None) -> SearchService:
        return SearchService(
            orchestrator=FetchOrchestrator(sources),
            cache=cache if cache is not None else memory_cache,
        )

    return _build


@pytest_asyncio.fixture
async def api_client() -> AsyncIterator[Callable[[SearchService], AsyncClient]]:
    """
    Provide an async HTTP test client factory for integration tests.

    The SearchService dependency is overridden so no real site or
    database is touched.
    """
    clients: list[AsyncClient] = []

    def _client(service: SearchService) -> AsyncClient:
        app.dependency_overrides[get_search_service] = lambda: service
        client = AsyncClient(
            transport=ASGITransport(app=app), base_url="http://testserver"
        )
        clients.append(client)
        return client

    yield _client

    for client in clients:
        await client.aclose()
    app.dependency_overrides.clear()
