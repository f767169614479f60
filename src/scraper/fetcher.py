"""HTTP fetcher — GET a page and return its raw markup."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

import httpx

from .errors import RemoteRejection, classify_exception
from .models import ScrapingOptions

logger = logging.getLogger(__name__)

MAX_REDIRECTS = 5

# Signature shared by the real fetcher and test doubles.
Fetch = Callable[[str, ScrapingOptions], Awaitable[str]]


async def fetch_page(
    url: str,
    options: ScrapingOptions,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Fetch *url* and return the body verbatim.

    Any status below 400 counts as success. Failures are raised as
    :class:`~src.scraper.errors.ScrapeError` subclasses.
    """
    try:
        async with httpx.AsyncClient(
            follow_redirects=True,
            max_redirects=MAX_REDIRECTS,
            timeout=options.timeout / 1000,
            headers=options.request_headers(),
            transport=transport,
        ) as client:
            resp = await client.get(url)
    except Exception as exc:
        error = classify_exception(exc)
        logger.debug("fetch failed", extra={"url": url, "error_kind": error.kind})
        raise error from exc

    if resp.status_code >= 400:
        logger.debug("fetch rejected", extra={"url": url, "status_code": resp.status_code})
        raise RemoteRejection(resp.status_code)

    logger.debug(
        "fetch complete",
        extra={"url": url, "status_code": resp.status_code, "bytes": len(resp.content)},
    )
    return resp.text
