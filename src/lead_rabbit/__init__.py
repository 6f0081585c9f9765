"""LeadRabbit content core: Reddit post formatting and lead display helpers."""

from __future__ import annotations

__version__ = "0.1.0"

from .blocks import parse_blocks
from .content import build_post_content, format_post_content, has_renderable_content
from .inline import resolve_inline
from .relative_time import format_relative_time
from .sanitize import clean_reddit_content, no_cleanup, sanitize
from .scanner import contains_keyword, matching_keywords

__all__ = [
    "__version__",
    "build_post_content",
    "clean_reddit_content",
    "contains_keyword",
    "format_post_content",
    "format_relative_time",
    "has_renderable_content",
    "matching_keywords",
    "no_cleanup",
    "parse_blocks",
    "resolve_inline",
    "sanitize",
]
