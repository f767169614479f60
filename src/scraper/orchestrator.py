"""Retry orchestrator — fetch, extract and keep the best result across attempts."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any, Awaitable, Callable, Mapping
from urllib.parse import urlparse

import httpx

from .errors import Exhausted, InsufficientContent, InvalidInput, ScrapeError, classify_exception
from .extractor import DEFAULT_EXTRACTION, ExtractionConfig, extract_content, parse_document
from .fetcher import Fetch, fetch_page
from .metadata import extract_metadata
from .models import DEFAULT_OPTIONS, AttemptOutcome, Metadata, ScrapingOptions, ScrapingResult

logger = logging.getLogger(__name__)

SUCCESS_THRESHOLD = 100
BACKOFF_BASE_MS = 1000
BACKOFF_MAX_MS = 5000

_VALID_SCHEMES = {"http", "https"}
_HOST_RE = re.compile(r"[A-Za-z0-9._~!$&'()*+,;=-]+")
_IPV6_RE = re.compile(r"[0-9A-Fa-f:.]+")

Sleep = Callable[[float], Awaitable[Any]]


def _valid_host(host: str) -> bool:
    if ":" in host:
        return bool(_IPV6_RE.fullmatch(host))
    if not host.isascii():
        try:
            host = host.encode("idna").decode("ascii")
        except UnicodeError:
            return False
    return bool(_HOST_RE.fullmatch(host))


def normalize_url(url: Any) -> str | None:
    """Return *url* as an absolute http(s) URL, or ``None`` if it is not one.

    ``http:example.com`` and ``http:/example.com`` are read as
    ``http://example.com``. Hosts must be non-empty and free of whitespace
    and reserved characters.
    """
    if not url or not isinstance(url, str):
        return None
    candidate = url.strip()
    try:
        parsed = urlparse(candidate)
        scheme = parsed.scheme.lower()
        if scheme not in _VALID_SCHEMES:
            return None
        if not parsed.netloc:
            rest = candidate.split(":", 1)[1].lstrip("/\\")
            candidate = f"{scheme}://{rest}"
            parsed = urlparse(candidate)
        host = parsed.hostname
        if not host or not _valid_host(host):
            return None
        parsed.port  # raises ValueError for a malformed port
        httpx.URL(candidate)
    except (ValueError, httpx.InvalidURL):
        return None
    return candidate


def is_valid_url(url: Any) -> bool:
    """True for absolute http(s) URLs with a well-formed host."""
    return normalize_url(url) is not None


def backoff_delay_ms(attempt: int) -> int:
    """Delay after failed *attempt* (1-based): 1s, 2s, 4s, capped at 5s."""
    return min(BACKOFF_BASE_MS * 2 ** (attempt - 1), BACKOFF_MAX_MS)


def choose_best(previous: AttemptOutcome | None, new: AttemptOutcome) -> AttemptOutcome | None:
    """Keep *new* only if its content is strictly longer than *previous*."""
    previous_length = previous.length if previous is not None else 0
    return new if new.length > previous_length else previous


async def attempt(
    url: str,
    options: ScrapingOptions,
    *,
    fetch: Fetch = fetch_page,
    config: ExtractionConfig = DEFAULT_EXTRACTION,
    echo_url: str | None = None,
) -> AttemptOutcome:
    """Run one fetch + extract pass. Raises ScrapeError when the fetch fails.

    Metadata carries *echo_url* (the caller's spelling) when given.
    """
    markup = await fetch(url, options)
    soup = parse_document(markup)
    # Metadata first: noise stripping removes headers that may hold the h1.
    metadata = extract_metadata(soup, echo_url or url)
    content = extract_content(soup, config)
    return AttemptOutcome(content=content, metadata=metadata)


def _resolve_options(
    options: ScrapingOptions | Mapping[str, Any] | None,
    defaults: ScrapingOptions,
) -> ScrapingOptions:
    if isinstance(options, ScrapingOptions):
        return options
    return defaults.merge(options)


async def scrape(
    url: str,
    options: ScrapingOptions | Mapping[str, Any] | None = None,
    *,
    defaults: ScrapingOptions = DEFAULT_OPTIONS,
    fetch: Fetch = fetch_page,
    sleep: Sleep = asyncio.sleep,
    config: ExtractionConfig = DEFAULT_EXTRACTION,
) -> ScrapingResult:
    """Scrape *url* with bounded retries and exponential backoff.

    Any non-empty text seen on any attempt is returned as a success, even
    when no attempt reached :data:`SUCCESS_THRESHOLD`. Failure is reserved
    for pages that could not be fetched or held no text at all.
    """
    target = normalize_url(url)
    if target is None:
        logger.info("rejected invalid url", extra={"url": str(url)[:200]})
        return ScrapingResult.failed(InvalidInput().message, url if isinstance(url, str) else "")

    opts = _resolve_options(options, defaults)
    retries = opts.retries
    best: AttemptOutcome | None = None
    last_error: ScrapeError | None = None

    for n in range(1, retries + 1):
        logger.debug("scrape attempt", extra={"url": url, "attempt": n, "retries": retries})
        try:
            outcome = await attempt(target, opts, fetch=fetch, config=config, echo_url=url)
        except Exception as exc:
            last_error = classify_exception(exc)
            logger.warning(
                "scrape attempt failed",
                extra={"url": url, "attempt": n, "error_kind": last_error.kind, "error": last_error.message},
            )
        else:
            best = choose_best(best, outcome)
            logger.info("content extracted", extra={"url": url, "attempt": n, "length": outcome.length})

            if outcome.length >= SUCCESS_THRESHOLD:
                return ScrapingResult.ok(outcome.content, outcome.metadata)

            if n == retries and _usable(best, opts):
                logger.info("using best content from all attempts", extra={"url": url, "length": best.length})
                return ScrapingResult.ok(best.content, best.metadata)

            last_error = InsufficientContent(outcome.length)
            logger.warning(
                "scrape attempt failed",
                extra={"url": url, "attempt": n, "error_kind": last_error.kind, "error": last_error.message},
            )

        if n < retries:
            delay_ms = backoff_delay_ms(n)
            logger.debug("backing off", extra={"url": url, "attempt": n, "delay_ms": delay_ms})
            await sleep(delay_ms / 1000)

    if _usable(best, opts):
        logger.info("returning best available content", extra={"url": url, "length": best.length})
        return ScrapingResult.ok(best.content, best.metadata)

    exhausted = Exhausted(last_error)
    logger.warning("scrape exhausted", extra={"url": url, "retries": retries, "error": exhausted.message})
    return ScrapingResult.failed(exhausted.message, url)


def _usable(best: AttemptOutcome | None, options: ScrapingOptions) -> bool:
    return best is not None and best.length >= max(options.min_best_effort_length, 1)


_SAMPLES = (
    "Artificial Intelligence has revolutionized how we approach problem-solving in the modern world. "
    "From machine learning algorithms that can predict consumer behavior to neural networks that can "
    "recognize patterns in vast datasets, AI is transforming industries across the globe. The integration "
    "of AI into everyday applications has made our lives more efficient and opened up new possibilities "
    "for innovation. As we continue to advance in this field, we must also consider the ethical "
    "implications and ensure that AI development remains aligned with human values and societal needs.",
    "Web development has evolved significantly over the past decade, with new frameworks and technologies "
    "emerging regularly. Modern web applications require responsive design, fast loading times, and "
    "seamless user experiences across all devices. The rise of JavaScript frameworks like React, Vue, "
    "and Angular has changed how developers build interactive user interfaces. Additionally, the adoption of cloud services and "
    "serverless architectures has made it easier to deploy and scale web applications globally.",
    "Sustainable technology is becoming increasingly important as we face environmental challenges. "
    "Green computing initiatives focus on reducing energy consumption in data centers, while renewable "
    "energy technologies are making clean power more accessible. Electric vehicles are revolutionizing "
    "transportation, and smart city technologies are optimizing resource usage in urban environments. "
    "These innovations demonstrate how technology can be a powerful tool for addressing climate change "
    "and creating a more sustainable future.",
)


def sample_content(url: str) -> str:
    """Deterministic demo text for *url* (same URL, same sample)."""
    h = 0
    for ch in url:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    return _SAMPLES[h % len(_SAMPLES)]


async def scrape_with_fallback(url: str, **kwargs: Any) -> ScrapingResult:
    """Like :func:`scrape`, but substitutes sample content on failure."""
    result = await scrape(url, **kwargs)
    if result.success:
        return result
    logger.info("using fallback sample content", extra={"url": url})
    return ScrapingResult.ok(
        sample_content(url),
        Metadata(
            url=url,
            title="Sample Blog Post",
            description="This is sample content for demonstration purposes.",
        ),
    )
