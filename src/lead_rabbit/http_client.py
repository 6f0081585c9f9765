"""Centralized HTTP client configuration for RSS-Bridge requests.

Provides a configured httpx.AsyncClient with:
- Connection limits
- A short default timeout (bridges are tried one after another)
- Browser-like headers asking for JSON
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

import httpx

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = httpx.Timeout(timeout=3.0, connect=3.0)

DEFAULT_LIMITS = httpx.Limits(
    max_connections=10,
    max_keepalive_connections=5,
    keepalive_expiry=30.0,
)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.9",
    "Cache-Control": "no-cache",
}

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/121.0.0.0 Safari/537.36"
)


@asynccontextmanager
async def create_http_client(
    user_agent: str | None = None,
    timeout: httpx.Timeout | None = None,
    limits: httpx.Limits | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Create a configured HTTP client for bridge requests.

    Example:
        async with create_http_client() as client:
            response = await client.get(bridge_url)
    """
    headers = DEFAULT_HEADERS.copy()
    headers["User-Agent"] = user_agent or DEFAULT_USER_AGENT

    client = httpx.AsyncClient(
        timeout=timeout or DEFAULT_TIMEOUT,
        limits=limits or DEFAULT_LIMITS,
        headers=headers,
        follow_redirects=True,
    )

    logger.debug("http_client_created", user_agent=headers["User-Agent"][:50])

    try:
        yield client
    finally:
        await client.aclose()
        logger.debug("http_client_closed")


def parse_retry_after(response: httpx.Response) -> float | None:
    """Parse the Retry-After header (seconds or HTTP-date)."""
    retry_after = response.headers.get("Retry-After")
    if not retry_after:
        return None

    try:
        return float(retry_after)
    except ValueError:
        pass

    try:
        dt = parsedate_to_datetime(retry_after)
        return max(0.0, (dt - datetime.now(timezone.utc)).total_seconds())
    except (ValueError, TypeError):
        return None
