"""Post body cleanup before block parsing.

Reddit RSS bodies end with an attribution footer of the form
``submitted by /u/<handle> [link] [comments]``. It carries no content, so it
is removed after the general HTML cleanup has run.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable

from bs4 import BeautifulSoup

from .logging_config import get_logger

logger = get_logger(__name__)

Cleaner = Callable[[str], str]

METADATA_FOOTER = r"submitted\s+by\s+/u/\S+\s*\[link\]\s*\[comments\]"

# Whole last line is the footer
_FOOTER_LINE_RE = re.compile(METADATA_FOOTER, re.IGNORECASE)

# Footer at the end of any line; whitespace before it is trimmed separately
_TRAILING_FOOTER_RE = re.compile(rf"{METADATA_FOOTER}\s*$", re.IGNORECASE | re.MULTILINE)

# Opening, closing or self-closing tag
_HTML_TAG_RE = re.compile(r"</?[A-Za-z][A-Za-z0-9-]*(?:\s[^<>]*)?/?>")


def clean_reddit_content(text: str) -> str:
    """Strip HTML markup and decode entities, keeping indentation and line breaks.

    Text without any tag is only entity-decoded, so a literal ``<`` in plain
    markdown is kept as-is.
    """
    if _HTML_TAG_RE.search(text):
        text = BeautifulSoup(text, "lxml").get_text()
    else:
        text = html.unescape(text)
    return text.strip("\n").rstrip()


def no_cleanup(text: str) -> str:
    """Cleaner that returns the text unchanged."""
    return text


def _strip_trailing_footers(text: str) -> str:
    if "submitted" not in text.lower():
        return text

    pieces: list[str] = []
    position = 0
    for match in _TRAILING_FOOTER_RE.finditer(text):
        pieces.append(text[position : match.start()].rstrip())
        position = match.end()
    pieces.append(text[position:])
    return "".join(pieces)


def sanitize(raw: str | None, cleaner: Cleaner = clean_reddit_content) -> str:
    """Clean a raw post body and drop the RSS attribution footer.

    Args:
        raw: Original post body, or None when the post has no body
        cleaner: Upstream cleanup applied before footer stripping

    Returns:
        Sanitized text. Empty when there is nothing left to render.
    """
    if not raw:
        return ""

    cleaned = cleaner(raw)

    lines = cleaned.split("\n")
    if _FOOTER_LINE_RE.fullmatch(lines[-1].strip()):
        lines.pop()
        cleaned = "\n".join(lines)
        logger.debug("metadata_footer_stripped", location="last_line")

    stripped = _strip_trailing_footers(cleaned)
    if stripped != cleaned:
        logger.debug("metadata_footer_stripped", location="trailing")

    return stripped
