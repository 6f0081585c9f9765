"""Scan command - check text against lead keywords."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from ..config import get_settings
from ..logging_config import configure_logging
from ..scanner import matching_keywords
from . import app, console


@app.command()
def scan(
    text: Annotated[
        str | None,
        typer.Argument(help="Text to scan (e.g. post title + body)."),
    ] = None,
    keywords: Annotated[
        list[str] | None,
        typer.Option(
            "--keyword",
            "-k",
            help="Keyword to look for (can specify multiple). Defaults to LEAD_RABBIT_DEFAULT_KEYWORDS.",
        ),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Read the text to scan from a file.",
        ),
    ] = None,
):
    """Check whether text mentions any keyword as a whole word.

    Exits with status 1 when no keyword matches.
    """
    try:
        settings = get_settings()
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1) from e

    configure_logging(settings.log_level, settings.log_json)

    if file is not None:
        try:
            text = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Could not read {file}:[/red] {e}")
            raise typer.Exit(1) from e

    if not text:
        console.print("[red]Nothing to scan.[/red] Pass TEXT or --file.")
        raise typer.Exit(1)

    scan_keywords = list(keywords) if keywords else list(settings.default_keywords)
    if not scan_keywords:
        console.print("[red]No keywords given.[/red] Use --keyword or set LEAD_RABBIT_DEFAULT_KEYWORDS.")
        raise typer.Exit(1)

    found = matching_keywords(text, scan_keywords)

    if not found:
        console.print(f"[yellow]No matches[/yellow] for {len(scan_keywords)} keywords")
        raise typer.Exit(1)

    table = Table(title="Keyword Matches", show_header=True, header_style="bold")
    table.add_column("#", width=3)
    table.add_column("Keyword")
    for i, keyword in enumerate(found, 1):
        table.add_row(str(i), keyword)

    console.print(table)
    console.print(f"[green]✓ {len(found)} of {len(scan_keywords)} keywords matched[/green]")
