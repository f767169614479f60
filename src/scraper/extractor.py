"""Content extraction cascade.

Runs every selector strategy over a cleaned document and keeps the longest
text, then falls back to paragraph aggregation and finally to the whole
body when the selectors found too little.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup

from .models import ExtractionCandidate
from .noise import NOISE_SELECTORS, strip_noise
from .strategies import DEFAULT_STRATEGIES, SelectorStrategy, element_text, longest

logger = logging.getLogger(__name__)

PARSER = "lxml"


@dataclass(frozen=True)
class ExtractionConfig:
    strategies: tuple[SelectorStrategy, ...] = DEFAULT_STRATEGIES
    noise_selectors: tuple[str, ...] = NOISE_SELECTORS
    # Longer selector matches are trusted as the article body outright.
    accept_length: int = 1000
    min_paragraph_length: int = 20
    body_fallback_below: int = 50


DEFAULT_EXTRACTION = ExtractionConfig()


def parse_document(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, PARSER)


def paragraph_candidate(soup: BeautifulSoup, min_length: int) -> ExtractionCandidate:
    paragraphs = [element_text(p) for p in soup.find_all("p")]
    text = "\n\n".join(p for p in paragraphs if len(p) > min_length)
    return ExtractionCandidate(text=text, source="paragraphs")


def body_candidate(soup: BeautifulSoup) -> ExtractionCandidate:
    root = soup.body or soup
    return ExtractionCandidate(text=element_text(root), source="body")


def extract_content(soup: BeautifulSoup, config: ExtractionConfig = DEFAULT_EXTRACTION) -> str:
    """Return the best article text in *soup*, or ``""``.

    *soup* is mutated: noise subtrees are removed before extraction.
    """
    strip_noise(soup, config.noise_selectors)

    best = longest(
        candidate
        for strategy in config.strategies
        for candidate in strategy.candidates(soup)
    )
    if best.length > config.accept_length:
        logger.debug("selector match accepted", extra={"source": best.source, "length": best.length})
        return best.text

    paragraphs = paragraph_candidate(soup, config.min_paragraph_length)
    if paragraphs.length > best.length:
        best = paragraphs

    if best.length < config.body_fallback_below:
        body = body_candidate(soup)
        if body.length > best.length:
            best = body

    logger.debug("content extracted", extra={"source": best.source or "none", "length": best.length})
    return best.text


def extract(markup: str, config: ExtractionConfig = DEFAULT_EXTRACTION) -> str:
    """Parse *markup* into a fresh working copy and extract its content."""
    return extract_content(parse_document(markup), config)
