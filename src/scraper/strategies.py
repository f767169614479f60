"""Selector strategies for locating the main content container.

Each strategy is plain data: a name and a CSS query. Adding or removing a
locator is an edit to :data:`DEFAULT_STRATEGIES`, not to the extractor.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from bs4 import BeautifulSoup, Tag

from .models import EMPTY_CANDIDATE, ExtractionCandidate

_WHITESPACE_RE = re.compile(r"\s+")
_NEWLINES_RE = re.compile(r"\n+")


def clean_text(text: str) -> str:
    """Collapse whitespace runs to a space and blank-line runs to one newline."""
    text = _WHITESPACE_RE.sub(" ", text)
    text = _NEWLINES_RE.sub("\n", text)
    return text.strip()


def element_text(element: Tag) -> str:
    return clean_text(element.get_text())


@dataclass(frozen=True)
class SelectorStrategy:
    name: str
    selector: str

    def candidates(self, soup: BeautifulSoup) -> Iterator[ExtractionCandidate]:
        for element in soup.select(self.selector):
            yield ExtractionCandidate(text=element_text(element), source=self.name)


def longest(candidates: Iterable[ExtractionCandidate]) -> ExtractionCandidate:
    """Pick the longest candidate; on ties the first one seen wins."""
    best = EMPTY_CANDIDATE
    for candidate in candidates:
        if candidate.length > best.length:
            best = candidate
    return best


def _group(prefix: str, selectors: Iterable[str]) -> tuple[SelectorStrategy, ...]:
    return tuple(SelectorStrategy(name=f"{prefix}:{s}", selector=s) for s in selectors)


# Site-specific containers first, then semantic containers, then broad
# class-name substring matches.
DEFAULT_STRATEGIES: tuple[SelectorStrategy, ...] = (
    *_group("site", (
        ".blog-post-content",
        ".post-content",
        ".blog-content",
        '[data-testid="blog-content"]',
        ".content-wrapper",
    )),
    *_group("semantic", (
        "article",
        '[role="main"]',
        ".entry-content",
        ".article-content",
        ".content",
        ".post-body",
        ".story-body",
        ".article-body",
        "main",
        ".main-content",
        "#content",
        ".blog-post",
        ".post",
        ".entry",
    )),
    *_group("class", (
        'div[class*="content"]',
        'div[class*="post"]',
        'div[class*="article"]',
        'div[class*="blog"]',
        'section[class*="content"]',
        'section[class*="post"]',
    )),
)
