"""knigopoisk.org — ``.book-item`` cards with a short description."""

from booksearch.domain.models import UNKNOWN_AUTHOR, RawRecord
from booksearch.infrastructure.sources.base import (
    absolute_link,
    is_book_title,
    make_soup,
    node_text,
)

NAME = "knigopoisk.org"
ORIGIN = "https://knigopoisk.org"
SEARCH_URL = ORIGIN + "/search/books?q={query}"


def parse(html: str) -> list[RawRecord]:
    soup = make_soup(html)
    books = []
    for item in soup.select(".book-item"):
        title_link = item.select_one(".book-title a")
        title = node_text(title_link)
        if not is_book_title(title):
            continue

        link = absolute_link(ORIGIN, title_link.get("href"))
        if link is None:
            continue

        books.append(
            RawRecord(
                title=title,
                author=node_text(item.select_one(".book-author a")) or UNKNOWN_AUTHOR,
                description=node_text(item.select_one(".book-description")),
                download_link=link,
                source=NAME,
            )
        )
    return books
