"""Render command - format a Reddit post body for preview."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from ..config import get_settings
from ..console_render import render_nodes
from ..content import build_post_content, truncate_content
from ..logging_config import configure_logging
from ..sanitize import clean_reddit_content, no_cleanup
from . import app, console


def read_input(path: str) -> str:
    """Read a post body from a file, or from stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


@app.command()
def render(
    path: Annotated[
        str,
        typer.Argument(help="File containing the post body, or '-' to read stdin."),
    ] = "-",
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the formatted nodes as JSON instead of a preview.",
        ),
    ] = False,
    no_clean: Annotated[
        bool,
        typer.Option(
            "--no-clean",
            help="Skip HTML entity decoding and tag stripping.",
        ),
    ] = False,
):
    """Format a Reddit post body into paragraphs, lists and code blocks.

    Strips the RSS attribution footer, then resolves bold, italic and links.
    """
    try:
        settings = get_settings()
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1) from e

    configure_logging(settings.log_level, settings.log_json)

    try:
        raw = read_input(path)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Could not read {path}:[/red] {e}")
        raise typer.Exit(1) from e

    raw = truncate_content(raw, settings.max_content_chars)
    cleaner = no_cleanup if no_clean or not settings.clean_html else clean_reddit_content
    content = build_post_content(raw, cleaner=cleaner)

    if as_json:
        typer.echo(content.model_dump_json(indent=2))
        return

    console.print(render_nodes(content.nodes))
