"""
Time-windowed cache of search results, keyed by the literal query.

Three interchangeable backends satisfy the same two-method contract:

  - MongoQueryCache: durable, used when a MongoDB URI is configured
  - MemoryQueryCache: process-local, for development and tests
  - NullQueryCache: no-op, every lookup is a miss

Backends never raise: a broken store behaves like an empty one.
Query strings are not normalised, so "Tolstoy" and "tolstoy " are
different keys.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Protocol

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from booksearch.core.config import Settings, settings
from booksearch.core.exceptions import CacheError
from booksearch.core.logging import get_logger
from booksearch.domain.models import CacheEntry, GroupedRecord
from booksearch.infrastructure.db.mongo import connect_to_mongo, ensure_indexes
from booksearch.infrastructure.db.repository import SearchCacheRepository

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QueryCache(Protocol):
    async def lookup(self, query: str) -> Optional[list[GroupedRecord]]:
        ...

    async def store(self, query: str, results: list[GroupedRecord]) -> None:
        ...


class NullQueryCache:
    """Cache used when no durable store is configured."""

    async def lookup(self, query: str) -> Optional[list[GroupedRecord]]:
        return None

    async def store(self, query: str, results: list[GroupedRecord]) -> None:
        return None


class MemoryQueryCache:
    """In-process cache with the same freshness rule as the Mongo one."""

    def __init__(self, ttl_seconds: float, clock: Clock = utcnow) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    async def lookup(self, query: str) -> Optional[list[GroupedRecord]]:
        entry = self._entries.get(query)
        if entry is None or not entry.is_fresh(self._clock(), self._ttl):
            return None
        return [record.model_copy(deep=True) for record in entry.results]

    async def store(self, query: str, results: list[GroupedRecord]) -> None:
        self._entries[query] = CacheEntry(
            query=query,
            results=[record.model_copy(deep=True) for record in results],
            created_at=self._clock(),
        )


class MongoQueryCache:
    """Cache backed by the ``search_cache`` MongoDB collection."""

    def __init__(
        self,
        repository: SearchCacheRepository,
        ttl_seconds: float,
        clock: Clock = utcnow,
    ) -> None:
        self._repo = repository
        self._ttl = ttl_seconds
        self._clock = clock

    async def lookup(self, query: str) -> Optional[list[GroupedRecord]]:
        cutoff = self._clock() - timedelta(seconds=self._ttl)
        try:
            doc = await self._repo.find_fresh(query, cutoff)
        except CacheError as exc:
            logger.warning("Cache lookup unavailable, treating as miss: %s", exc.message)
            return None

        if doc is None:
            logger.debug("Cache MISS for query=%r", query)
            return None

        try:
            results = [GroupedRecord.model_validate(item) for item in doc.get("results", [])]
        except ValidationError as exc:
            logger.warning("Ignoring malformed cache entry for query=%r: %s", query, exc)
            return None

        logger.info("Cache HIT for query=%r (%d results)", query, len(results))
        return results

    async def store(self, query: str, results: list[GroupedRecord]) -> None:
        try:
            await self._repo.upsert(
                query,
                [record.model_dump() for record in results],
                self._clock(),
            )
        except CacheError as exc:
            logger.warning("Cache store skipped: %s", exc.message)


async def create_query_cache(config: Settings = settings) -> QueryCache:
    """
    Build the configured cache backend.

    A Mongo backend that cannot be reached at startup degrades to the
    null cache so the service still answers searches.
    """
    backend = config.cache_backend.lower()

    if backend == "memory":
        logger.info("Using in-memory query cache")
        return MemoryQueryCache(ttl_seconds=config.cache_ttl_seconds)

    if backend == "mongo" and config.mongo_uri:
        try:
            await connect_to_mongo(config.mongo_uri)
            await ensure_indexes()
        except PyMongoError as exc:
            logger.error("MongoDB unavailable, query caching disabled: %s", exc)
            return NullQueryCache()
        logger.info("Using MongoDB query cache")
        return MongoQueryCache(
            SearchCacheRepository(), ttl_seconds=config.cache_ttl_seconds
        )

    if backend not in ("mongo", "none"):
        logger.warning("Unknown cache backend %r, query caching disabled", backend)
    else:
        logger.info("No durable store configured, query caching disabled")
    return NullQueryCache()
