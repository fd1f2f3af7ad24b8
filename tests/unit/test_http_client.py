"""
Unit tests for the page fetcher.

Tests cover:
  - Successful fetch with httpx text decoding
  - Legacy-encoding decoding of the raw body
  - Non-2xx, timeout and connection errors
"""

import pytest
from unittest.mock import AsyncMock, patch, MagicMock

import httpx

from booksearch.core.exceptions import SourceFetchError
from booksearch.infrastructure.crawler.http_client import fetch_page


def _mock_client(mock_client_cls, *, response=None, side_effect=None):
    mock_client = AsyncMock()
    mock_client.get = AsyncMock(return_value=response, side_effect=side_effect)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    mock_client_cls.return_value = mock_client
    return mock_client


@pytest.mark.asyncio
class TestFetchPage:
    """Tests for the fetch_page function."""

    @patch("booksearch.infrastructure.crawler.http_client.httpx.AsyncClient")
    async def test_successful_fetch(self, mock_client_cls):
        """Should return the decoded body and send the User-Agent."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = "<html><body>Книги</body></html>"
        _mock_client(mock_client_cls, response=mock_response)

        body = await fetch_page(
            "https://litnet.com/ru/search?q=x", timeout=8.0, user_agent="UA/1.0"
        )

        assert "Книги" in body
        kwargs = mock_client_cls.call_args.kwargs
        assert kwargs["headers"] == {"User-Agent": "UA/1.0"}
        assert kwargs["follow_redirects"] is True

    @patch("booksearch.infrastructure.crawler.http_client.httpx.AsyncClient")
    async def test_decodes_legacy_encoding(self, mock_client_cls):
        """Should decode raw bytes with the requested codec."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.content = "<li><b>Толстой:</b></li>".encode("koi8_r")
        _mock_client(mock_client_cls, response=mock_response)

        body = await fetch_page(
            "http://lib.ru/cgi-bin/search?q=x",
            timeout=10.0,
            user_agent="UA",
            encoding="koi8_r",
        )

        assert body == "<li><b>Толстой:</b></li>"

    @patch("booksearch.infrastructure.crawler.http_client.httpx.AsyncClient")
    async def test_undecodable_body_raises(self, mock_client_cls):
        """Should report a body that does not decode as a fetch error."""
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.content = b"\xff\xfe\xfa"
        _mock_client(mock_client_cls, response=mock_response)

        with pytest.raises(SourceFetchError) as exc_info:
            await fetch_page("https://x.test", timeout=1, user_agent="UA", encoding="utf-8")

        assert "utf-8" in exc_info.value.message

    @patch("booksearch.infrastructure.crawler.http_client.httpx.AsyncClient")
    async def test_non_success_status_raises(self, mock_client_cls):
        """Should raise SourceFetchError on a 403."""
        mock_response = MagicMock()
        mock_response.status_code = 403
        _mock_client(mock_client_cls, response=mock_response)

        with pytest.raises(SourceFetchError) as exc_info:
            await fetch_page("https://blocked.test", timeout=1, user_agent="UA")

        assert "403" in exc_info.value.message

    @patch("booksearch.infrastructure.crawler.http_client.httpx.AsyncClient")
    async def test_timeout_raises(self, mock_client_cls):
        """Should raise SourceFetchError on request timeout."""
        _mock_client(
            mock_client_cls,
            side_effect=httpx.TimeoutException("Connection timed out"),
        )

        with pytest.raises(SourceFetchError) as exc_info:
            await fetch_page("https://slow.test", timeout=8.0, user_agent="UA")

        assert "timed out" in exc_info.value.message.lower()

    @patch("booksearch.infrastructure.crawler.http_client.httpx.AsyncClient")
    async def test_connection_error_raises(self, mock_client_cls):
        """Should raise SourceFetchError on connection failure."""
        _mock_client(
            mock_client_cls,
            side_effect=httpx.ConnectError("Connection refused"),
        )

        with pytest.raises(SourceFetchError) as exc_info:
            await fetch_page("https://down.test", timeout=8.0, user_agent="UA")

        assert "connection failed" in exc_info.value.message.lower()
