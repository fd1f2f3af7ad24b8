"""
FastAPI dependency injection.

Provides the shared SearchService for use across API endpoints.
The lifespan builds it with the configured cache; requests served
without a lifespan get one with caching disabled.
"""

from fastapi import Request

from booksearch.core.config import Settings, settings
from booksearch.domain.aggregator import FetchOrchestrator
from booksearch.domain.search_service import SearchService
from booksearch.infrastructure.cache.query_cache import NullQueryCache, QueryCache
from booksearch.infrastructure.sources.registry import build_sources


def build_search_service(
    cache: QueryCache, config: Settings = settings
) -> SearchService:
    """Wire a SearchService to the configured book sources."""
    orchestrator = FetchOrchestrator(build_sources(config))
    return SearchService(orchestrator=orchestrator, cache=cache)


def get_search_service(request: Request) -> SearchService:
    """
    Provide the application's SearchService.

    Registered as a FastAPI dependency so endpoints receive a
    fully-wired service without coupling to infrastructure details.
    """
    service = getattr(request.app.state, "search_service", None)
    if service is None:
        service = build_search_service(NullQueryCache())
        request.app.state.search_service = service
    return service
