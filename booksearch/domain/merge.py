"""
Grouping of raw search hits into canonical book entries.

Records from different sites describing the same work are grouped by
a lowercase (author, title) key. No transliteration, punctuation
stripping or fuzzy matching is applied: "Tolstoy, Leo" and
"Leo Tolstoy" are different authors here.
"""

from typing import Iterable

from booksearch.domain.models import (
    GENRE_PREFIX,
    GroupedRecord,
    RawRecord,
    SourceLink,
)


def group_key(author: str, title: str) -> str:
    """Return the normalised grouping key for an (author, title) pair."""
    return f"{author.strip().lower()}|{title.strip().lower()}"


def merge_records(records: Iterable[RawRecord]) -> list[GroupedRecord]:
    """
    Merge raw records into one GroupedRecord per distinct key.

    The first record seen for a key seeds title, author and description.
    Every record contributes a source entry. A later description replaces
    the current one only when it is strictly longer and the current one
    is not genre-derived; genre labels are never overwritten.

    Output follows first-seen key order, so the result is deterministic
    for a fixed input order.
    """
    grouped: dict[str, GroupedRecord] = {}

    for record in records:
        key = group_key(record.author, record.title)

        entry = grouped.get(key)
        if entry is None:
            entry = GroupedRecord(
                title=record.title,
                author=record.author,
                description=record.description,
                sources=[],
            )
            grouped[key] = entry

        entry.sources.append(
            SourceLink(name=record.source, link=record.download_link)
        )

        if (
            len(record.description) > len(entry.description)
            and not entry.description.startswith(GENRE_PREFIX)
        ):
            entry.description = record.description

    return list(grouped.values())
