"""
Concurrent fan-out of a query to every configured book source.
"""

import asyncio
from typing import Protocol, Sequence

from booksearch.core.logging import get_logger
from booksearch.domain.models import RawRecord

logger = get_logger(__name__)


class BookSource(Protocol):
    """Anything that can search one site for books."""

    name: str

    async def extract(self, query: str) -> list[RawRecord]:
        ...


class FetchOrchestrator:
    """Runs all sources concurrently and flattens what they return."""

    def __init__(self, sources: Sequence[BookSource]) -> None:
        self._sources = list(sources)

    async def fetch_all(self, query: str) -> list[RawRecord]:
        """
        Search every source and return their combined records.

        Waits for every source to settle; one failing or finishing early
        never cancels the others. Failed sources contribute nothing.
        Records keep the declared source order, not completion order.
        """
        outcomes = await asyncio.gather(
            *(source.extract(query) for source in self._sources),
            return_exceptions=True,
        )

        records: list[RawRecord] = []
        for source, outcome in zip(self._sources, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning(
                    "Source %s failed for query=%r: %s", source.name, query, outcome
                )
                continue
            if not isinstance(outcome, list):
                logger.warning(
                    "Source %s returned %s instead of a list, ignoring",
                    source.name,
                    type(outcome).__name__,
                )
                continue
            records.extend(outcome)

        logger.info(
            "Collected %d records from %d sources for query=%r",
            len(records),
            len(self._sources),
            query,
        )
        return records
