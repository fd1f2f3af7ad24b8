"""
FastAPI application lifespan management.

Handles startup and shutdown of all long-lived resources:
  - Logging setup
  - Query cache (MongoDB connection and indexes when configured)
  - The shared SearchService
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from booksearch.api.dependencies import build_search_service
from booksearch.core.logging import setup_logging, get_logger
from booksearch.infrastructure.cache.query_cache import create_query_cache
from booksearch.infrastructure.db.mongo import close_mongo

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Manage application lifecycle.

    Startup:
      1. Configure logging
      2. Create the query cache (connects to MongoDB if configured)
      3. Build the SearchService

    Shutdown:
      1. Wait for pending cache writes
      2. Close MongoDB connection
    """
    # ── Startup ──────────────────────────────────────────────
    setup_logging()
    logger.info("Starting book search service...")

    cache = await create_query_cache()
    app.state.search_service = build_search_service(cache)
    logger.info("Search service ready (cache=%s)", type(cache).__name__)

    yield

    # ── Shutdown ─────────────────────────────────────────────
    logger.info("Shutting down book search service...")
    await app.state.search_service.flush()
    await close_mongo()
    logger.info("Shutdown complete")
