"""
flibusta.is — plain anchor list inside ``#main``.

Book links carry a ``/b/<id>`` href; the author link (``/a/<id>``)
follows the book link, either as its sibling or its parent's sibling.
The search for an author stops at the next book link, so a book
without an author never borrows the following book's.
"""

from typing import Optional

from bs4 import Tag

from booksearch.domain.models import UNKNOWN_AUTHOR, RawRecord
from booksearch.infrastructure.sources.base import (
    absolute_link,
    is_book_title,
    make_soup,
    node_text,
)

NAME = "flibusta.is"
ORIGIN = "http://flibusta.is"
SEARCH_URL = ORIGIN + "/booksearch?ask={query}"
PLACEHOLDER_DESCRIPTION = "Description will be added later."


def _is_book_href(href: Optional[str]) -> bool:
    return bool(href) and href.startswith("/b/")


def _is_author_href(href: Optional[str]) -> bool:
    return bool(href) and href.startswith("/a/")


def _scan_for_author(node: Tag) -> Optional[str]:
    """
    Look through the siblings after ``node`` for an author link.

    Returns the author text, "" when the next book link comes first,
    or None when the siblings run out.
    """
    for sibling in node.next_siblings:
        if not isinstance(sibling, Tag):
            continue
        if sibling.name == "a":
            href = sibling.get("href")
            if _is_book_href(href):
                return ""
            if _is_author_href(href):
                return node_text(sibling)
        elif sibling.find("a", href=_is_book_href) is not None:
            return ""
    return None


def _find_author(link: Tag) -> str:
    author = _scan_for_author(link)
    if author is None and link.parent is not None:
        author = _scan_for_author(link.parent)
    return author or ""


def parse(html: str) -> list[RawRecord]:
    soup = make_soup(html)
    books = []
    for link in soup.select("#main a"):
        href = link.get("href")
        if not _is_book_href(href):
            continue

        title = node_text(link)
        if not is_book_title(title):
            continue

        books.append(
            RawRecord(
                title=title,
                author=_find_author(link) or UNKNOWN_AUTHOR,
                description=PLACEHOLDER_DESCRIPTION,
                download_link=absolute_link(ORIGIN, href),
                source=NAME,
            )
        )
    return books
