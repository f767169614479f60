"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.routes import router
from src.config import get_settings
from src.logging_config import setup_logging
from src.storage.redis import FullTextStore, SummaryStore, create_redis_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting scraper service")

    redis_client = create_redis_client(settings.redis_url)

    app.state.settings = settings
    app.state.full_text_store = FullTextStore(redis_client, ttl=settings.storage_ttl_seconds)
    app.state.summary_store = SummaryStore(redis_client, ttl=settings.storage_ttl_seconds)

    logger.info(
        "scraper service ready",
        extra={
            "scrape_timeout_ms": settings.scrape_timeout_ms,
            "scrape_retries": settings.scrape_retries,
            "persist_results": settings.persist_results,
        },
    )

    yield

    logger.info("shutting down scraper service")
    await redis_client.aclose()


app = FastAPI(title="Scraper Service", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
