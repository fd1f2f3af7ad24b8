"""
Site extractor — one configured search against one book site.

Each site differs only in its search URL, timeout, body encoding and
the parse function that turns its HTML into RawRecords. Those are
supplied as configuration; there is no per-site subclass.
"""

import asyncio
from typing import Callable, Optional
from urllib.parse import quote, urljoin

from bs4 import BeautifulSoup, Tag

from booksearch.core.logging import get_logger
from booksearch.domain.models import RawRecord
from booksearch.infrastructure.crawler.http_client import fetch_page

logger = get_logger(__name__)

# Link texts that some sites render as anchors next to the real title
_LINK_ARTIFACTS = {"читать", "скачать", "read", "download"}

Parser = Callable[[str], list[RawRecord]]


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def node_text(node: Optional[Tag]) -> str:
    """Trimmed text of a node, or "" when the node is missing."""
    if node is None:
        return ""
    return node.get_text().strip()


def is_book_title(title: str) -> bool:
    """Reject empty titles and read/download link artifacts."""
    return bool(title) and title.lower() not in _LINK_ARTIFACTS


def absolute_link(origin: str, href: Optional[str]) -> Optional[str]:
    """
    Resolve a site-relative href against the site's origin.

    Returns None for a missing or blank href; such an anchor does not
    point at a book page.
    """
    if not href or not href.strip():
        return None
    return urljoin(origin, href.strip())


class SiteExtractor:
    """Searches one book site and parses its results page."""

    def __init__(
        self,
        name: str,
        search_url: str,
        parse: Parser,
        *,
        timeout: float,
        user_agent: str,
        encoding: Optional[str] = None,
    ) -> None:
        self.name = name
        self.search_url = search_url
        self.timeout = timeout
        self.user_agent = user_agent
        self.encoding = encoding
        self._parse = parse

    def build_url(self, query: str) -> str:
        return self.search_url.format(query=quote(query, safe=""))

    async def extract(self, query: str) -> list[RawRecord]:
        """
        Search the site for ``query``.

        Never raises: any failure is logged and yields an empty list.
        """
        url = self.build_url(query)
        try:
            html = await asyncio.wait_for(
                fetch_page(
                    url,
                    timeout=self.timeout,
                    user_agent=self.user_agent,
                    encoding=self.encoding,
                ),
                timeout=self.timeout,
            )
            records = await asyncio.to_thread(self._parse, html)
        except asyncio.TimeoutError:
            logger.warning("%s: search timed out after %.1fs", self.name, self.timeout)
            return []
        except Exception as exc:
            logger.warning("%s: search failed: %s", self.name, exc)
            return []

        logger.info("%s found %d books", self.name, len(records))
        return records
