"""
Static configuration of the book sources.

The list order is the source priority: records from earlier sources
come first in the merged output.
"""

from booksearch.core.config import Settings, settings
from booksearch.infrastructure.sources import (
    ereading,
    flibusta,
    knigopoisk,
    libru,
    litnet,
    royallib,
)
from booksearch.infrastructure.sources.base import SiteExtractor


def build_sources(config: Settings = settings) -> list[SiteExtractor]:
    """Create one extractor per supported site."""
    common = {"user_agent": config.user_agent}
    return [
        SiteExtractor(
            flibusta.NAME, flibusta.SEARCH_URL, flibusta.parse,
            timeout=config.source_timeout, **common,
        ),
        SiteExtractor(
            litnet.NAME, litnet.SEARCH_URL, litnet.parse,
            timeout=config.source_timeout, **common,
        ),
        SiteExtractor(
            knigopoisk.NAME, knigopoisk.SEARCH_URL, knigopoisk.parse,
            timeout=config.source_timeout, **common,
        ),
        SiteExtractor(
            royallib.NAME, royallib.SEARCH_URL, royallib.parse,
            timeout=config.source_timeout, **common,
        ),
        SiteExtractor(
            ereading.NAME, ereading.SEARCH_URL, ereading.parse,
            timeout=config.source_timeout, **common,
        ),
        SiteExtractor(
            libru.NAME, libru.SEARCH_URL, libru.parse,
            timeout=config.legacy_source_timeout,
            encoding=libru.ENCODING,
            **common,
        ),
    ]
