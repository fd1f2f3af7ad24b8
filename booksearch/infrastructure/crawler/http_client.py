"""
HTTP client for fetching book-site search pages.

Uses httpx.AsyncClient for non-blocking HTTP requests with a spoofed
browser User-Agent and a per-request timeout. Every failure mode is
reported as SourceFetchError so extractors have one thing to catch.
"""

from typing import Optional

import httpx

from booksearch.core.exceptions import SourceFetchError
from booksearch.core.logging import get_logger

logger = get_logger(__name__)


async def fetch_page(
    url: str,
    *,
    timeout: float,
    user_agent: str,
    encoding: Optional[str] = None,
) -> str:
    """
    Fetch a page and return its body as text.

    Args:
        url: The fully built search URL.
        timeout: Timeout in seconds for the request.
        user_agent: User-Agent header to send.
        encoding: Codec to decode the raw body with. When omitted,
            httpx decodes using the response charset.

    Returns:
        The decoded page body.

    Raises:
        SourceFetchError: On non-2xx status, timeout, transport error
            or a body that does not decode.
    """
    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            max_redirects=10,
            headers={"User-Agent": user_agent},
        ) as client:
            logger.debug("Fetching url=%s", url)
            response = await client.get(url)

            if not 200 <= response.status_code < 300:
                raise SourceFetchError(url, f"HTTP {response.status_code}")

            if encoding:
                body = response.content.decode(encoding)
            else:
                body = response.text

            logger.debug(
                "Fetched url=%s (status=%d, size=%d chars)",
                url,
                response.status_code,
                len(body),
            )
            return body

    except SourceFetchError:
        raise

    except httpx.TimeoutException as exc:
        raise SourceFetchError(url, f"Request timed out after {timeout}s") from exc

    except httpx.TooManyRedirects as exc:
        raise SourceFetchError(url, "Too many redirects") from exc

    except httpx.HTTPError as exc:
        raise SourceFetchError(url, f"Connection failed: {exc}") from exc

    except UnicodeDecodeError as exc:
        raise SourceFetchError(url, f"Body is not valid {encoding}") from exc
