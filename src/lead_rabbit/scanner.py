"""Level 1 keyword filter.

A cheap regex check that runs before a post is sent for AI analysis. Keywords
match as whole words, case-insensitively: "seo" matches "looking for SEO help"
but not "season".
"""

from __future__ import annotations

import re
import time

from .logging_config import get_logger

logger = get_logger(__name__)


def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)


def contains_keyword(text: str | None, keywords: list[str] | None) -> bool:
    """Check whether any keyword appears in the text as a whole word.

    Args:
        text: Content to search (e.g. post title + body)
        keywords: Keywords to look for

    Returns:
        True on the first matching keyword, False otherwise
    """
    if text is None or keywords is None:
        logger.warning("keyword_scan_invalid_input", has_text=text is not None, has_keywords=keywords is not None)
        return False

    if not text or not keywords:
        logger.debug("keyword_scan_empty_input", text_length=len(text), keywords_count=len(keywords))
        return False

    started = time.perf_counter()

    for index, keyword in enumerate(keywords):
        if not keyword:
            logger.debug("keyword_scan_skip_empty", keyword_index=index)
            continue

        if _keyword_pattern(keyword).search(text):
            logger.info(
                "keyword_matched",
                keyword=keyword,
                keyword_index=index,
                total_keywords=len(keywords),
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return True

    logger.debug(
        "keyword_scan_no_match",
        keywords_checked=len(keywords),
        elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return False


def matching_keywords(text: str | None, keywords: list[str] | None) -> list[str]:
    """Return every keyword found in the text, in input order."""
    if not text or not keywords:
        return []
    return [kw for kw in keywords if kw and _keyword_pattern(kw).search(text)]
