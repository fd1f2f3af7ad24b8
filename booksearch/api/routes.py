"""
API routes for the book search service.

Defines the search and download endpoints. Uses FastAPI dependency
injection for clean separation from business logic.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from booksearch.api.dependencies import get_search_service
from booksearch.api.schemas import (
    DownloadResponse,
    ErrorResponse,
    SearchErrorResponse,
    SearchResponse,
)
from booksearch.core.exceptions import QueryValidationError
from booksearch.core.logging import get_logger
from booksearch.domain.search_service import SearchService

logger = get_logger(__name__)

router = APIRouter(tags=["Books"])


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search books across all sources",
    description=(
        "Searches every configured book site concurrently and returns "
        "one entry per distinct (author, title) with all the sites it was "
        "found on. Sites that fail contribute nothing; if nothing is found "
        "at all, a fixed demo catalog is returned."
    ),
    responses={
        400: {"model": SearchErrorResponse, "description": "Missing query"},
        500: {"model": ErrorResponse, "description": "Internal failure"},
    },
)
async def search_books(
    q: Optional[str] = Query(
        None,
        description="Free-text search query",
        examples=["Толстой"],
    ),
    service: SearchService = Depends(get_search_service),
):
    """GET /search?q=... — Search all book sources for ``q``."""
    try:
        results = await service.search(q)
        return SearchResponse(results=results)

    except QueryValidationError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=SearchErrorResponse(error=exc.message).model_dump(),
        )

    except Exception as exc:
        logger.error("Unexpected error in search_books: %s", exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Internal server error").model_dump(),
        )


@router.get(
    "/download/{book_id}",
    response_model=DownloadResponse,
    summary="Download a book (not implemented yet)",
)
async def download_book(book_id: str) -> DownloadResponse:
    """GET /download/{id} — Acknowledge the request; delivery is pending."""
    return DownloadResponse(id=book_id)
