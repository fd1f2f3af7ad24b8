"""litnet.com — ``.book-item`` cards with an annotation snippet."""

from booksearch.domain.models import UNKNOWN_AUTHOR, RawRecord
from booksearch.infrastructure.sources.base import (
    absolute_link,
    is_book_title,
    make_soup,
    node_text,
)

NAME = "litnet.com"
ORIGIN = "https://litnet.com"
SEARCH_URL = ORIGIN + "/ru/search?q={query}"


def parse(html: str) -> list[RawRecord]:
    soup = make_soup(html)
    books = []
    for item in soup.select(".book-item"):
        title_link = item.select_one("h4.book-title a")
        title = node_text(title_link)
        if not is_book_title(title):
            continue

        # The cover links to the book page; fall back to the title link
        cover = item.select_one("a.cover")
        link = (
            absolute_link(ORIGIN, cover.get("href")) if cover is not None else None
        ) or absolute_link(ORIGIN, title_link.get("href"))
        if link is None:
            continue

        books.append(
            RawRecord(
                title=title,
                author=node_text(item.select_one(".author-name")) or UNKNOWN_AUTHOR,
                description=node_text(item.select_one(".annotation-text")),
                download_link=link,
                source=NAME,
            )
        )
    return books
