"""Reddit post content formatting pipeline.

raw body -> sanitize -> parse_blocks -> resolve_inline (per paragraph and list item)
"""

from __future__ import annotations

from .blocks import parse_blocks
from .inline import resolve_inline
from .logging_config import get_logger
from .models import BlockNode, ListBlock, ListItem, Paragraph, PostContent
from .sanitize import Cleaner, clean_reddit_content, sanitize

logger = get_logger(__name__)


def resolve_block(block: BlockNode) -> BlockNode:
    """Return a copy of ``block`` with inline spans filled in.

    Code blocks and breaks are returned as-is.
    """
    if isinstance(block, Paragraph):
        return Paragraph(text=block.text, spans=resolve_inline(block.text))
    if isinstance(block, ListBlock):
        return ListBlock(
            list_kind=block.list_kind,
            items=[ListItem(text=item.text, spans=resolve_inline(item.text)) for item in block.items],
        )
    return block


def format_post_content(raw: str | None, cleaner: Cleaner = clean_reddit_content) -> list[BlockNode]:
    """Format a raw post body into block nodes with resolved inline spans.

    Args:
        raw: Post body as stored by the ingestion pipeline (may be None)
        cleaner: Upstream cleanup applied before footer stripping

    Returns:
        Ordered block nodes. Empty when the post has no renderable content.
    """
    sanitized = sanitize(raw, cleaner)
    if not sanitized:
        return []

    nodes = [resolve_block(block) for block in parse_blocks(sanitized)]
    logger.debug("post_content_formatted", chars=len(sanitized), blocks=len(nodes))
    return nodes


def build_post_content(raw: str | None, cleaner: Cleaner = clean_reddit_content) -> PostContent:
    """Wrap ``format_post_content`` output in a serializable model."""
    return PostContent(nodes=format_post_content(raw, cleaner))


def has_renderable_content(raw: str | None, cleaner: Cleaner = clean_reddit_content) -> bool:
    """Whether a post body yields anything to display."""
    return bool(format_post_content(raw, cleaner))


def truncate_content(raw: str | None, max_chars: int) -> str | None:
    """Cap a post body at ``max_chars`` characters."""
    if raw is None or len(raw) <= max_chars:
        return raw
    logger.warning("post_content_truncated", original_chars=len(raw), max_chars=max_chars)
    return raw[:max_chars]
