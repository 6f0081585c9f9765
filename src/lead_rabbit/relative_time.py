"""Relative timestamps for lead cards ("5m ago", "3d ago")."""

from __future__ import annotations

import time


def format_relative_time(created_utc: float, now: float | None = None) -> str:
    """Format a Unix timestamp (seconds) relative to ``now``.

    Args:
        created_utc: Post creation time in seconds since the epoch
        now: Reference time in seconds (defaults to the current time)

    Returns:
        "just now", "12m ago", "3h ago", "2d ago", "1w ago", "5mo ago" or "2y ago"
    """
    current = int(time.time()) if now is None else int(now)
    diff = current - int(created_utc)

    if diff < 60:
        return "just now"

    minutes = diff // 60
    if minutes < 60:
        return f"{minutes}m ago"

    hours = diff // 3600
    if hours < 24:
        return f"{hours}h ago"

    days = diff // 86400
    if days < 7:
        return f"{days}d ago"

    weeks = days // 7
    if weeks < 4:
        return f"{weeks}w ago"

    months = max(days // 30, 1)
    if months < 12:
        return f"{months}mo ago"

    return f"{max(days // 365, 1)}y ago"
