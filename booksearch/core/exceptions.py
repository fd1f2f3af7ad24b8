"""
Custom application exceptions.

Centralised exception definitions for clean error handling
across all layers of the application.
"""


class BookSearchError(Exception):
    """Base exception for the book search service."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class QueryValidationError(BookSearchError):
    """Raised when the search query is missing or blank."""

    def __init__(self, reason: str = "Search query is required"):
        self.reason = reason
        super().__init__(reason)


class SourceFetchError(BookSearchError):
    """
    Raised when a book site cannot be searched.

    Examples: non-2xx status, timeout, connection refused,
    a body that does not decode in the site's encoding.
    """

    def __init__(self, url: str, reason: str = "Unknown error"):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch '{url}': {reason}")


class CacheError(BookSearchError):
    """Raised when a query cache operation fails."""

    def __init__(self, operation: str, reason: str = "Unknown error"):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Cache error during '{operation}': {reason}")
