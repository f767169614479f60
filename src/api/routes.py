"""POST /scrape and POST /summarize endpoint handlers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse

from src.api import service
from src.api.schemas import ScrapeRequest, ScrapeResponse, SummarizeRequest, SummarizeResponse
from src.config import Settings
from src.storage.redis import FullTextStore, SummaryStore

logger = logging.getLogger(__name__)

router = APIRouter()

_SERVER_ERROR = {"success": False, "error": "Server error"}


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _get_full_text_store(request: Request) -> FullTextStore:
    return request.app.state.full_text_store


def _get_summary_store(request: Request) -> SummaryStore:
    return request.app.state.summary_store


@router.post("/scrape", response_model=ScrapeResponse, response_model_exclude_none=True)
async def scrape_page(
    body: ScrapeRequest,
    settings: Settings = Depends(_get_settings),
):
    try:
        result = await service.scrape_url(settings, body)
    except Exception:
        logger.exception("scrape failed", extra={"url": body.url[:200]})
        return JSONResponse(status_code=500, content=_SERVER_ERROR)
    return service.to_response(result)


@router.post("/summarize", response_model=SummarizeResponse, response_model_exclude_none=True)
async def summarize_page(
    body: SummarizeRequest,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(_get_settings),
    full_text_store: FullTextStore = Depends(_get_full_text_store),
    summary_store: SummaryStore = Depends(_get_summary_store),
):
    try:
        return await service.summarize_url(
            settings, full_text_store, summary_store, body.url, background_tasks
        )
    except Exception:
        logger.exception("summarize failed", extra={"url": body.url[:200]})
        return JSONResponse(status_code=500, content=_SERVER_ERROR)
