"""
Application configuration using Pydantic Settings.

All configuration is read from environment variables (12-factor app),
with sensible defaults for local development. Leaving ``MONGO_URI``
unset disables the durable query cache entirely.
"""

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Central application configuration."""

    # Query cache
    cache_backend: str = Field(
        default="mongo",
        description="Query cache backend: mongo | memory | none",
    )
    mongo_uri: Optional[str] = Field(
        default=None,
        description="MongoDB connection URI; caching is disabled when unset",
    )
    mongo_db_name: str = Field(
        default="book_search",
        description="MongoDB database name",
    )
    cache_ttl_seconds: int = Field(
        default=3600,
        description="How long a cached search result stays fresh",
    )

    # Outbound requests to book sites
    source_timeout: float = Field(
        default=8.0,
        description="Timeout in seconds for a single book-site search",
    )
    legacy_source_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for the KOI8-R encoded lib.ru search",
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/108.0.0.0 Safari/537.36"
        ),
        description="User-Agent header sent to book sites",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Application log level (DEBUG, INFO, WARNING, ERROR)",
    )

    # API Server
    api_host: str = Field(default="0.0.0.0", description="API bind host")
    api_port: int = Field(default=5000, description="API bind port")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this throughout the app
settings = Settings()
