"""
API request/response schemas.

These Pydantic models define the contract between the API layer
and external clients. They are separate from domain models to
allow the API surface to evolve independently.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from booksearch.domain.models import GroupedRecord


class SearchResponse(BaseModel):
    """Merged search results."""

    results: list[GroupedRecord] = Field(
        default_factory=list,
        description="One entry per distinct (author, title), with every source",
    )


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error description")


class SearchErrorResponse(ErrorResponse):
    """Error response for the search endpoint, always with no results."""

    results: list[GroupedRecord] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Liveness probe payload."""

    status: str = Field(default="OK")
    timestamp: datetime


class DownloadResponse(BaseModel):
    """Placeholder answer of the download endpoint."""

    message: str = Field(default="Download feature is under development")
    id: str
