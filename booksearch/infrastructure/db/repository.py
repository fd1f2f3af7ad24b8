"""
Search cache repository — MongoDB operations.

All database interactions for cached search results go through this
module. Uses Motor async driver for non-blocking I/O.
"""

from datetime import datetime
from typing import Any

from pymongo.errors import PyMongoError

from booksearch.core.exceptions import CacheError
from booksearch.core.logging import get_logger
from booksearch.infrastructure.db.mongo import SEARCH_CACHE_COLLECTION, get_database

logger = get_logger(__name__)


class SearchCacheRepository:
    """Async repository for cached search results in MongoDB."""

    COLLECTION_NAME = SEARCH_CACHE_COLLECTION

    def _get_collection(self):
        """Return the search cache collection handle."""
        return get_database()[self.COLLECTION_NAME]

    async def find_fresh(
        self, query: str, created_after: datetime
    ) -> dict[str, Any] | None:
        """
        Look up a cached result stored after ``created_after``.

        Args:
            query: The verbatim query string.
            created_after: Oldest acceptable storage time.

        Returns:
            The document dict if a fresh one exists, otherwise None.
        """
        try:
            return await self._get_collection().find_one(
                {"query": query, "created_at": {"$gt": created_after}}
            )
        except PyMongoError as exc:
            logger.error("Cache lookup failed for query=%r: %s", query, exc)
            raise CacheError("find_fresh", str(exc)) from exc

    async def upsert(
        self, query: str, results: list[dict[str, Any]], created_at: datetime
    ) -> None:
        """
        Insert or replace the cached result for a query.

        Repeated stores for the same query overwrite the previous
        document and reset its ``created_at``.

        Args:
            query: The verbatim query string (unique key).
            results: Serialised grouped records.
            created_at: Storage time.
        """
        try:
            await self._get_collection().update_one(
                {"query": query},
                {"$set": {"results": results, "created_at": created_at}},
                upsert=True,
            )
            logger.info("Cached %d results for query=%r", len(results), query)
        except PyMongoError as exc:
            logger.error("Cache upsert failed for query=%r: %s", query, exc)
            raise CacheError("upsert", str(exc)) from exc
