"""Fetch command - pull recent posts from subreddits via RSS-Bridge."""

from __future__ import annotations

import asyncio
import json
from dataclasses import asdict
from typing import Annotated

import typer
from rich.table import Table

from ..config import get_settings
from ..logging_config import configure_logging
from ..reddit import fetch_subreddit_posts, filter_posts_by_keywords
from ..relative_time import format_relative_time
from ..scanner import matching_keywords
from . import app, console


@app.command()
def fetch(
    subreddits: Annotated[
        list[str],
        typer.Option(
            "--subreddit",
            "-s",
            help="Subreddit to fetch, without r/ (can specify multiple).",
        ),
    ],
    keywords: Annotated[
        list[str] | None,
        typer.Option(
            "--keyword",
            "-k",
            help="Only keep posts mentioning a keyword (can specify multiple).",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the posts as JSON instead of a table.",
        ),
    ] = False,
):
    """Fetch recent posts from one or more subreddits.

    Bridges are tried in order; the whole fetch stops once the time budget is spent.
    Exits with status 1 when no post could be fetched.
    """
    try:
        settings = get_settings()
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1) from e

    configure_logging(settings.log_level, settings.log_json)

    posts = asyncio.run(
        fetch_subreddit_posts(
            subreddits,
            bridges=settings.reddit_bridges,
            time_budget=settings.reddit_time_budget_seconds,
            bridge_timeout=settings.reddit_bridge_timeout_seconds,
            user_agent=settings.user_agent,
        )
    )

    if not posts:
        console.print("[red]No posts fetched.[/red] Every bridge failed or the time budget ran out.")
        raise typer.Exit(1)

    fetched = len(posts)
    if keywords:
        posts = filter_posts_by_keywords(posts, list(keywords))

    if as_json:
        typer.echo(json.dumps([asdict(post) for post in posts], indent=2))
        return

    table = Table(title="Fetched Posts", show_header=True, header_style="bold")
    table.add_column("Subreddit", style="cyan")
    table.add_column("Title")
    table.add_column("Age", justify="right")
    if keywords:
        table.add_column("Keywords", style="green")

    for post in posts:
        row = [f"r/{post.subreddit}", post.title, format_relative_time(post.created_utc)]
        if keywords:
            row.append(", ".join(matching_keywords(post.keyword_text, list(keywords))))
        table.add_row(*row)

    console.print(table)
    console.print(f"[green]✓ {len(posts)} of {fetched} posts shown[/green]")
