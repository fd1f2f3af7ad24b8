"""
lib.ru (Maxim Moshkov's library) — plain ``<li>`` list.

The site serves KOI8-R; the extractor decodes the body with
``ENCODING`` before it reaches ``parse``, so this module only
ever sees text.
"""

from booksearch.domain.models import UNKNOWN_AUTHOR, RawRecord
from booksearch.infrastructure.sources.base import (
    absolute_link,
    is_book_title,
    make_soup,
    node_text,
)

NAME = "lib.ru"
ORIGIN = "http://lib.ru"
SEARCH_URL = ORIGIN + "/cgi-bin/search?q={query}"
ENCODING = "koi8_r"
PLACEHOLDER_DESCRIPTION = "Found in Maxim Moshkov's library (lib.ru)"


def parse(html: str) -> list[RawRecord]:
    soup = make_soup(html)
    books = []
    for item in soup.find_all("li"):
        link = item.find("a")
        if link is None:
            continue

        download_link = absolute_link(ORIGIN, link.get("href"))
        # Named anchors have no href
        if download_link is None:
            continue

        # Pagination and "search again" links point back at the search CGI
        if "cgi-bin/search" in download_link:
            continue

        title = node_text(link)
        if not is_book_title(title):
            continue

        # Authors are rendered as "<b>Surname Name:</b>"
        author = node_text(item.find("b")).replace(":", "", 1).strip()

        books.append(
            RawRecord(
                title=title,
                author=author or UNKNOWN_AUTHOR,
                description=PLACEHOLDER_DESCRIPTION,
                download_link=download_link,
                source=NAME,
            )
        )
    return books
