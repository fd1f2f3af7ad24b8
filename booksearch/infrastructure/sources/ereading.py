"""
e-reading.club — legacy table layout, one ``table.book`` per result.

Links are relative to the site root (``book.php?book=...``).
"""

from booksearch.domain.models import UNKNOWN_AUTHOR, RawRecord
from booksearch.infrastructure.sources.base import (
    absolute_link,
    is_book_title,
    make_soup,
    node_text,
)

NAME = "e-reading.club"
ORIGIN = "https://www.e-reading.club/"
SEARCH_URL = ORIGIN + "search.php?q={query}"


def _first_line(text: str) -> str:
    return text.strip().split("\n")[0].strip()


def parse(html: str) -> list[RawRecord]:
    soup = make_soup(html)
    books = []
    for block in soup.select("td > table.book"):
        title_link = block.select_one('a[href^="book.php?book="]')
        title = node_text(title_link)
        if not is_book_title(title):
            continue

        link = absolute_link(ORIGIN, title_link.get("href"))
        if link is None:
            continue

        author_link = block.select_one('a[href^="bookbyauthor.php?author="]')
        cells = block.select('td[valign="top"]')
        description = _first_line(cells[1].get_text()) if len(cells) > 1 else ""

        books.append(
            RawRecord(
                title=title,
                author=node_text(author_link) or UNKNOWN_AUTHOR,
                description=description,
                download_link=link,
                source=NAME,
            )
        )
    return books
