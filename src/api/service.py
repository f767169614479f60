"""Service layer — scrape, summarize, translate and persist for the API routes."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import Any

from fastapi import BackgroundTasks

from src.api.schemas import ScrapeRequest, ScrapeResponse, SummarizeResponse
from src.config import Settings
from src.scraper import ScrapingResult, scrape
from src.storage.redis import FullTextStore, StorageError, SummaryStore
from src.text.summarizer import summarise
from src.text.translator import glossary_for, translate

logger = logging.getLogger(__name__)


def to_response(result: ScrapingResult) -> ScrapeResponse:
    return ScrapeResponse.model_validate(dataclasses.asdict(result))


async def scrape_url(settings: Settings, body: ScrapeRequest) -> ScrapingResult:
    overrides: dict[str, Any] | None = body.options.overrides() if body.options else None
    logger.info("scrape requested", extra={"url": body.url[:200]})
    return await scrape(body.url, overrides, defaults=settings.scraping_defaults())


async def persist(
    full_text_store: FullTextStore,
    summary_store: SummaryStore,
    url: str,
    content: str,
    summary: str,
    translation: str,
) -> None:
    """Write to both sinks; storage failures are logged, never raised."""
    results = await asyncio.gather(
        full_text_store.save(url, content),
        summary_store.save(url, summary, translation),
        return_exceptions=True,
    )
    for outcome in results:
        if isinstance(outcome, StorageError):
            logger.warning("persist failed", extra={"url": url, "error": str(outcome)})
        elif isinstance(outcome, BaseException):
            logger.error("persist crashed", extra={"url": url}, exc_info=outcome)


async def summarize_url(
    settings: Settings,
    full_text_store: FullTextStore,
    summary_store: SummaryStore,
    url: str,
    background_tasks: BackgroundTasks,
) -> SummarizeResponse:
    """Scrape *url*, summarise and translate it, then persist in the background.

    The writes run after the response is sent; the request never waits on them.
    """
    result = await scrape(url, defaults=settings.scraping_defaults())
    if not result.success:
        return SummarizeResponse(success=False, url=url, error=result.error)

    content = result.content or ""
    summary = summarise(content)
    translation = translate(summary, glossary_for(settings.translation_target))
    logger.info(
        "summary generated",
        extra={"url": url, "content_length": len(content), "summary_length": len(summary)},
    )

    if settings.persist_results:
        background_tasks.add_task(
            persist, full_text_store, summary_store, url, content, summary, translation
        )

    return SummarizeResponse(
        success=True,
        url=url,
        title=result.metadata.title if result.metadata else "",
        content=content,
        summary=summary,
        translation=translation,
    )
