"""
Search service — core business logic.

Orchestrates one book search: cache lookup, concurrent fan-out to the
book sites, merging, fallback and cache population. This layer is
framework-agnostic and never lets an internal failure reach the caller.
"""

import asyncio
from typing import Callable, Optional

from booksearch.core.exceptions import QueryValidationError
from booksearch.core.logging import get_logger
from booksearch.domain.aggregator import FetchOrchestrator
from booksearch.domain.fallback import fallback_catalog
from booksearch.domain.merge import merge_records
from booksearch.domain.models import GroupedRecord
from booksearch.infrastructure.cache.query_cache import QueryCache

logger = get_logger(__name__)


class SearchService:
    """Business logic for book searches."""

    def __init__(
        self,
        orchestrator: FetchOrchestrator,
        cache: QueryCache,
        fallback: Callable[[], list[GroupedRecord]] = fallback_catalog,
    ) -> None:
        self._orchestrator = orchestrator
        self._cache = cache
        self._fallback = fallback
        self._pending_writes: set[asyncio.Task] = set()

    async def search(self, query: Optional[str]) -> list[GroupedRecord]:
        """
        Find books matching ``query`` across all sources.

        Flow:
          1. Reject a missing or blank query
          2. Return a fresh cached result if one exists
          3. Search every source concurrently and merge the hits
          4. Substitute the demo catalog when nothing was found
          5. Cache genuine results in the background (never the catalog)

        Args:
            query: The search text, used verbatim as the cache key.

        Returns:
            The grouped records, or an empty list if the search
            failed internally.

        Raises:
            QueryValidationError: If the query is missing or blank.
        """
        if query is None or not query.strip():
            raise QueryValidationError("Search query is required")

        try:
            cached = await self._lookup(query)
            if cached is not None:
                return cached

            records = await self._orchestrator.fetch_all(query)
            grouped = merge_records(records)

            if not grouped:
                logger.info("No books found for query=%r, returning demo catalog", query)
                return self._fallback()

            self._schedule_store(query, grouped)
            return grouped

        except Exception as exc:
            logger.error("Search failed for query=%r: %s", query, exc, exc_info=True)
            return []

    async def flush(self) -> None:
        """Wait for any background cache writes still in flight."""
        if self._pending_writes:
            await asyncio.gather(*self._pending_writes, return_exceptions=True)

    async def _lookup(self, query: str) -> Optional[list[GroupedRecord]]:
        try:
            return await self._cache.lookup(query)
        except Exception as exc:
            logger.error("Cache lookup failed for query=%r: %s", query, exc)
            return None

    def _schedule_store(self, query: str, results: list[GroupedRecord]) -> None:
        task = asyncio.create_task(self._store(query, results))
        self._pending_writes.add(task)
        task.add_done_callback(self._pending_writes.discard)

    async def _store(self, query: str, results: list[GroupedRecord]) -> None:
        try:
            await self._cache.store(query, results)
        except Exception as exc:
            logger.error("Cache store failed for query=%r: %s", query, exc)
