"""CLI subpackage for LeadRabbit.

Provides a modular CLI structure with commands organized by function.
"""

from __future__ import annotations

import typer
from rich.console import Console

app = typer.Typer(
    name="lead-rabbit",
    help="Format Reddit post bodies and check them against lead keywords.",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        from .. import __version__

        console.print(f"lead-rabbit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """LeadRabbit - preview Reddit lead content from the command line."""
    pass


# Import and register command modules
from . import fetch, render, scan, web  # noqa: E402, F401
