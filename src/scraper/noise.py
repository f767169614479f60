"""Noise stripping — remove subtrees that never carry article text."""

from __future__ import annotations

from bs4 import BeautifulSoup

NOISE_SELECTORS: tuple[str, ...] = (
    "nav",
    "header",
    "footer",
    ".advertisement",
    ".ads",
    ".sidebar",
    ".comments",
    ".social-share",
    ".related-posts",
    ".navigation",
    ".menu",
    "script",
    "style",
    "noscript",
    ".cookie-notice",
    ".popup",
)


def strip_noise(soup: BeautifulSoup, selectors: tuple[str, ...] = NOISE_SELECTORS) -> int:
    """Decompose every element matching *selectors* in place.

    Returns the number of subtrees removed. Nested matches inside an
    already removed subtree are skipped.
    """
    removed = 0
    for selector in selectors:
        for element in soup.select(selector):
            if element.decomposed:
                continue
            element.decompose()
            removed += 1
    return removed
