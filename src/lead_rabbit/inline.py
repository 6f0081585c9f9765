"""Inline markup resolution: bold, italic, links and bare URLs."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .models import BareUrl, Bold, InlineSpan, Italic, Link, PlainText

# Order matters for matches starting at the same offset: earlier families win.
_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("bold", re.compile(r"\*\*([^*]+)\*\*")),
    ("italic", re.compile(r"\*([^*]+)\*")),
    ("link", re.compile(r"\[([^\]]+)\]\(([^)]+)\)")),
    ("url", re.compile(r"(https?://\S+)")),
)


@dataclass(frozen=True)
class InlineMatch:
    """A raw pattern match with its ``[start, end)`` offsets."""

    start: int
    end: int
    kind: str
    content: str
    url: str | None = None

    def overlaps(self, other: InlineMatch) -> bool:
        return not (self.end <= other.start or self.start >= other.end)


def find_matches(text: str) -> list[InlineMatch]:
    """Collect matches from every pattern family, sorted by start offset."""
    matches: list[InlineMatch] = []
    for kind, pattern in _PATTERNS:
        for m in pattern.finditer(text):
            matches.append(
                InlineMatch(
                    start=m.start(),
                    end=m.end(),
                    kind=kind,
                    content=m.group(1),
                    url=m.group(2) if kind == "link" else None,
                )
            )
    # sorted() is stable, so same-offset ties keep the family order above
    return sorted(matches, key=lambda m: m.start)


def drop_overlapping(matches: list[InlineMatch]) -> list[InlineMatch]:
    """Keep each match only if it overlaps nothing kept before it."""
    kept: list[InlineMatch] = []
    for match in matches:
        if not any(match.overlaps(k) for k in kept):
            kept.append(match)
    return kept


def _to_span(match: InlineMatch) -> InlineSpan:
    if match.kind == "bold":
        return Bold(text=match.content)
    if match.kind == "italic":
        return Italic(text=match.content)
    if match.kind == "link":
        return Link(label=match.content, url=match.url)
    return BareUrl(url=match.content)


def resolve_inline(text: str) -> list[InlineSpan]:
    """Turn a line of text into plain and formatted spans.

    Example:
        >>> resolve_inline("Check **this** out")
        [PlainText(type='text', text='Check '), Bold(type='bold', text='this'), PlainText(type='text', text=' out')]
    """
    spans: list[InlineSpan] = []
    position = 0

    for match in drop_overlapping(find_matches(text)):
        if match.start > position:
            spans.append(PlainText(text=text[position : match.start]))
        spans.append(_to_span(match))
        position = match.end

    if position < len(text):
        spans.append(PlainText(text=text[position:]))

    if not spans:
        return [PlainText(text=text)]
    return spans
