"""Web server CLI command."""

from __future__ import annotations

import typer
import uvicorn

from ..config import get_settings
from . import app


@app.command()
def web(
    host: str | None = typer.Option(None, help="Host to bind to (defaults to LEAD_RABBIT_WEB_HOST)."),
    port: int | None = typer.Option(None, help="Port to bind to (defaults to LEAD_RABBIT_WEB_PORT)."),
    reload: bool = typer.Option(False, help="Enable auto-reload."),
):
    """Start the content formatting API."""
    settings = get_settings()
    uvicorn.run(
        "lead_rabbit.web_app:app",
        host=host or settings.web_host,
        port=port or settings.web_port,
        reload=reload,
    )
