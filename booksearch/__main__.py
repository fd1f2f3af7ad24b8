"""Run the API server: ``python -m booksearch``."""

import uvicorn

from booksearch.core.config import settings

if __name__ == "__main__":
    uvicorn.run("booksearch.main:app", host=settings.api_host, port=settings.api_port)
