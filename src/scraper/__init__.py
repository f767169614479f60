"""Web page scraping and main-content extraction."""

from __future__ import annotations

from .errors import (
    Exhausted,
    InsufficientContent,
    InvalidInput,
    NetworkFailure,
    RemoteRejection,
    ScrapeError,
)
from .extractor import DEFAULT_EXTRACTION, ExtractionConfig, extract, extract_content
from .fetcher import fetch_page
from .metadata import extract_metadata
from .models import DEFAULT_OPTIONS, Metadata, ScrapingOptions, ScrapingResult
from .orchestrator import scrape, scrape_with_fallback
from .strategies import DEFAULT_STRATEGIES, SelectorStrategy, clean_text

__all__ = [
    "DEFAULT_EXTRACTION",
    "DEFAULT_OPTIONS",
    "DEFAULT_STRATEGIES",
    "Exhausted",
    "ExtractionConfig",
    "InsufficientContent",
    "InvalidInput",
    "Metadata",
    "NetworkFailure",
    "RemoteRejection",
    "ScrapeError",
    "ScrapingOptions",
    "ScrapingResult",
    "SelectorStrategy",
    "clean_text",
    "extract",
    "extract_content",
    "extract_metadata",
    "fetch_page",
    "scrape",
    "scrape_with_fallback",
]
