"""
FastAPI application entrypoint.

Creates and configures the FastAPI application with:
  - Lifespan management (query cache, search service)
  - API router registration
  - CORS middleware
  - Custom exception handlers
  - Health check endpoint
"""

from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from booksearch.api.routes import router as books_router
from booksearch.api.schemas import HealthResponse
from booksearch.core.lifespan import lifespan
from booksearch.core.exceptions import BookSearchError


def create_app() -> FastAPI:
    """Application factory — creates and configures the FastAPI instance."""

    application = FastAPI(
        title="Book Search Aggregator",
        description=(
            "Searches several online book catalogs at once and returns "
            "deduplicated results, one entry per (author, title) with "
            "every site the book was found on."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Middleware ────────────────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes ───────────────────────────────────────────────
    application.include_router(books_router, prefix="/api")

    # ── Health Check ─────────────────────────────────────────
    @application.get(
        "/api/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Service health check",
        status_code=status.HTTP_200_OK,
    )
    async def health_check() -> HealthResponse:
        """Return service liveness; touches neither the cache nor any site."""
        return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc))

    # ── Exception Handlers ───────────────────────────────────
    @application.exception_handler(BookSearchError)
    async def book_search_error_handler(request: Request, exc: BookSearchError):
        """Handle all custom BookSearch exceptions."""
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.message},
        )

    @application.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Catch-all handler to prevent stack traces from leaking to clients."""
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    return application


# Create the app instance — referenced by uvicorn as booksearch.main:app
app = create_app()
