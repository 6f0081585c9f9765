"""Reddit post fetching through public RSS-Bridge instances (JSON Feed format).

Each subreddit is tried against the bridges in order until one answers with a
valid feed. The whole fetch runs within a time budget: once it is spent, no
further bridge or subreddit is attempted and the posts gathered so far are
returned.
"""

from __future__ import annotations

import re
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

import httpx

from .http_client import create_http_client
from .logging_config import get_logger
from .retry_policy import TransientHTTPError, bridge_retry, check_response_for_retry
from .sanitize import clean_reddit_content
from .scanner import contains_keyword

logger = get_logger(__name__)

DEFAULT_BRIDGES: tuple[str, ...] = (
    "https://rss-bridge.org/bridge01",
    "https://rss.bka.li",
    "https://feed.eugenemolnar.com",
    "https://bridge.suumitsu.eu",
    "https://rssbridge.noc.social",
)

# Whole fetch, all subreddits and bridges (seconds)
DEFAULT_TIME_BUDGET = 30.0

# Single bridge request (seconds)
DEFAULT_BRIDGE_TIMEOUT = 3.0

_SUBREDDIT_RE = re.compile(r"/r/([^/]+)")


@dataclass
class RedditPost:
    """Normalized Reddit post data."""

    id: str
    title: str
    body: str
    url: str
    author: str
    subreddit: str
    created_utc: int

    @property
    def keyword_text(self) -> str:
        """Title and body, the text the keyword filter runs on."""
        return f"{self.title} {self.body}"


class BridgeError(Exception):
    """A bridge answered, but not with a usable feed. Not retried."""


def bridge_feed_url(bridge: str, subreddit: str) -> str:
    return f"{bridge}/?action=display&bridge=Reddit&context=single&subreddit={subreddit}&format=Json"


def _extract_subreddit(url: str, fallback: str) -> str:
    match = _SUBREDDIT_RE.search(url) if url else None
    return match.group(1) if match else fallback


def _iso_to_unix(value: str) -> int:
    if not value:
        return 0
    try:
        return int(datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp())
    except ValueError:
        return 0


def _parse_feed_item(item: dict, subreddit: str) -> RedditPost | None:
    """Map a JSON Feed item to a RedditPost, or None when id/title are missing."""
    if not isinstance(item, dict):
        return None

    post_id = item.get("id") or ""
    title = item.get("title") or ""
    if not post_id or not title:
        return None

    url = item.get("url") or ""
    author = item.get("author") or {}

    return RedditPost(
        id=str(post_id),
        title=title,
        body=clean_reddit_content(item.get("content_html") or ""),
        url=url,
        author=author.get("name", "") if isinstance(author, dict) else "",
        subreddit=_extract_subreddit(url, subreddit),
        created_utc=_iso_to_unix(item.get("date_published") or ""),
    )


@bridge_retry
async def _fetch_bridge_feed(
    client: httpx.AsyncClient,
    bridge: str,
    subreddit: str,
    timeout: float,
) -> list[RedditPost]:
    """Fetch one subreddit's feed from one bridge.

    Raises:
        BridgeError: Non-success status, HTML challenge page or malformed feed
        TransientHTTPError: 429/5xx after retries are exhausted
    """
    url = bridge_feed_url(bridge, subreddit)
    logger.debug("fetching_bridge_feed", bridge=bridge, subreddit=subreddit)

    response = await client.get(url, timeout=timeout)
    check_response_for_retry(response)

    if not response.is_success:
        raise BridgeError(f"HTTP {response.status_code}")

    # Cloudflare challenge pages come back as 200 text/html
    if "text/html" in response.headers.get("content-type", ""):
        raise BridgeError("HTML response instead of JSON")

    try:
        data = response.json()
    except ValueError as e:
        raise BridgeError("Response is not valid JSON") from e

    items = data.get("items") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise BridgeError("Invalid JSON Feed structure")

    posts = []
    for item in items:
        post = _parse_feed_item(item, subreddit)
        if post:
            posts.append(post)

    logger.debug("bridge_feed_parsed", bridge=bridge, items=len(items), valid_posts=len(posts))
    return posts


async def fetch_subreddit(
    client: httpx.AsyncClient,
    subreddit: str,
    bridges: tuple[str, ...] | list[str],
    deadline: float,
    bridge_timeout: float = DEFAULT_BRIDGE_TIMEOUT,
    clock: Callable[[], float] = time.monotonic,
) -> list[RedditPost]:
    """Try each bridge in turn for one subreddit.

    Returns:
        Posts from the first bridge that answers with a valid feed, or an
        empty list when every bridge fails or the deadline passes
    """
    for bridge in bridges:
        if clock() >= deadline:
            logger.warning("time_budget_exceeded", subreddit=subreddit, stage="bridge")
            break

        try:
            posts = await _fetch_bridge_feed(client, bridge, subreddit, bridge_timeout)
        except BridgeError as e:
            logger.warning("bridge_failed", bridge=bridge, subreddit=subreddit, reason=str(e))
            continue
        except (TransientHTTPError, httpx.HTTPError) as e:
            logger.warning(
                "bridge_unavailable",
                bridge=bridge,
                subreddit=subreddit,
                error_type=type(e).__name__,
                error=str(e),
            )
            continue

        logger.info("subreddit_fetched", subreddit=subreddit, bridge=bridge, posts=len(posts))
        return posts

    logger.error("all_bridges_failed", subreddit=subreddit)
    return []


async def fetch_subreddit_posts(
    subreddits: list[str],
    bridges: tuple[str, ...] | list[str] = DEFAULT_BRIDGES,
    time_budget: float = DEFAULT_TIME_BUDGET,
    bridge_timeout: float = DEFAULT_BRIDGE_TIMEOUT,
    user_agent: str | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> list[RedditPost]:
    """Fetch posts from several subreddits, one after another.

    Args:
        subreddits: Subreddit names (without r/)
        bridges: RSS-Bridge base URLs, tried in order
        time_budget: Seconds allowed for the whole fetch
        bridge_timeout: Seconds allowed for a single bridge request
        user_agent: User agent string (uses the client default if not provided)
        clock: Monotonic clock used for the budget

    Returns:
        Combined list of posts in subreddit order
    """
    if not subreddits:
        logger.warning("no_subreddits_given")
        return []

    started = clock()
    deadline = started + time_budget
    all_posts: list[RedditPost] = []

    async with create_http_client(user_agent=user_agent) as client:
        for subreddit in subreddits:
            if clock() >= deadline:
                logger.warning("time_budget_exceeded", subreddit=subreddit, stage="subreddit")
                break
            all_posts.extend(
                await fetch_subreddit(client, subreddit, bridges, deadline, bridge_timeout, clock)
            )

    if not all_posts:
        logger.error("no_posts_fetched", subreddits=subreddits)
    else:
        logger.info(
            "all_subreddits_complete",
            subreddits=len(subreddits),
            total_posts=len(all_posts),
            elapsed_seconds=round(clock() - started, 2),
        )
    return all_posts


def filter_posts_by_keywords(posts: list[RedditPost], keywords: list[str]) -> list[RedditPost]:
    """Keep posts whose title or body mentions any keyword (Level 1 filter)."""
    return [post for post in posts if contains_keyword(post.keyword_text, keywords)]
