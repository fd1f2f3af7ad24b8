"""
royallib.com — results table (``table.stripy``), one book per row.

The third cell holds the genre, which becomes the description.
"""

from booksearch.domain.models import GENRE_PREFIX, UNKNOWN_AUTHOR, RawRecord
from booksearch.infrastructure.sources.base import (
    absolute_link,
    is_book_title,
    make_soup,
    node_text,
)

NAME = "royallib.com"
ORIGIN = "https://royallib.com"
SEARCH_URL = ORIGIN + "/search?q={query}"

GENRE_COLUMN = 2


def parse(html: str) -> list[RawRecord]:
    soup = make_soup(html)
    books = []
    for row in soup.select("table.stripy tr"):
        book_link = row.select_one('a[href*="/book/"]')
        if book_link is None:
            continue

        title = node_text(book_link)
        if not is_book_title(title):
            continue

        link = absolute_link(ORIGIN, book_link.get("href"))
        if link is None:
            continue

        cells = row.find_all("td")
        genre = node_text(cells[GENRE_COLUMN]) if len(cells) > GENRE_COLUMN else ""

        books.append(
            RawRecord(
                title=title,
                author=node_text(row.select_one('a[href*="/author/"]')) or UNKNOWN_AUTHOR,
                description=f"{GENRE_PREFIX} {genre}".rstrip(),
                download_link=link,
                source=NAME,
            )
        )
    return books
