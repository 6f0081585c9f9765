"""FastAPI application exposing content formatting and keyword scanning as JSON."""

from __future__ import annotations

from fastapi import FastAPI
from pydantic import BaseModel, Field

from .config import get_settings
from .content import build_post_content, truncate_content
from .logging_config import configure_logging, get_logger
from .models import PostContent
from .sanitize import clean_reddit_content, no_cleanup
from .scanner import matching_keywords

settings = get_settings()
configure_logging(settings.log_level, settings.log_json)
logger = get_logger(__name__)

app = FastAPI(title="LeadRabbit Content API")


class FormatRequest(BaseModel):
    """Post body to format."""

    content: str | None = Field(default=None, description="Raw post body; null means no content")
    clean_html: bool | None = Field(
        default=None,
        description="Run the HTML cleanup step (defaults to the server setting)",
    )


class ScanRequest(BaseModel):
    """Text to check against a keyword list."""

    text: str = Field(..., description="Content to search, e.g. title + body")
    keywords: list[str] = Field(
        default_factory=list,
        description="Keywords to look for (server defaults are used when empty)",
    )


class ScanResponse(BaseModel):
    matched: bool
    keywords: list[str]


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/content/format", response_model=PostContent)
async def format_content(request: FormatRequest) -> PostContent:
    clean = settings.clean_html if request.clean_html is None else request.clean_html
    raw = truncate_content(request.content, settings.max_content_chars)
    content = build_post_content(raw, cleaner=clean_reddit_content if clean else no_cleanup)
    logger.info("content_formatted", blocks=len(content.nodes), clean_html=clean)
    return content


@app.post("/api/keywords/scan", response_model=ScanResponse)
async def scan_keywords(request: ScanRequest) -> ScanResponse:
    keywords = request.keywords or settings.default_keywords
    found = matching_keywords(request.text, keywords)
    logger.info("keywords_scanned", keywords=len(keywords), matched=len(found))
    return ScanResponse(matched=bool(found), keywords=found)
