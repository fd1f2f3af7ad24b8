"""
Domain models — pure data structures for the book search service.

These models have no framework dependencies beyond Pydantic and
represent the core business entities. They are used across all layers.
"""

from datetime import datetime

from pydantic import BaseModel, Field

# Substituted when a site's markup has no locatable author
UNKNOWN_AUTHOR = "Unknown author"

# Prefix of descriptions derived from a site's genre column
GENRE_PREFIX = "Genre:"


class RawRecord(BaseModel):
    """
    A single book as found on one source site.

    Created fresh by each extractor invocation and consumed
    immediately by the merge step; never persisted on its own.
    """

    title: str = Field(..., description="Trimmed, non-empty book title")
    author: str = Field(default=UNKNOWN_AUTHOR, description="Book author")
    description: str = Field(default="", description="Free-text description")
    download_link: str = Field(
        ...,
        alias="downloadLink",
        description="Absolute URL of the book page on the source site",
    )
    source: str = Field(..., description="Name of the site that produced it")

    model_config = {"populate_by_name": True}


class SourceLink(BaseModel):
    """One site where a grouped book was found."""

    name: str = Field(..., description="Source site name")
    link: str = Field(..., description="Book page on that site")


class GroupedRecord(BaseModel):
    """
    Canonical book entry returned to callers.

    One exists per distinct (author, title) pair. Title and author
    come from the first contributing record; ``sources`` keeps
    arrival order.
    """

    title: str
    author: str
    description: str = ""
    sources: list[SourceLink] = Field(default_factory=list)


class CacheEntry(BaseModel):
    """A stored search result, keyed by the verbatim query string."""

    query: str
    results: list[GroupedRecord] = Field(default_factory=list)
    created_at: datetime

    def is_fresh(self, now: datetime, ttl_seconds: float) -> bool:
        """Return True while the entry is younger than the TTL."""
        return (now - self.created_at).total_seconds() < ttl_seconds
