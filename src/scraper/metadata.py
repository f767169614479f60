"""Title and description extraction from standard document locations."""

from __future__ import annotations

from bs4 import BeautifulSoup

from .models import Metadata
from .strategies import clean_text


def _meta_content(soup: BeautifulSoup, **attrs: str) -> str:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return ""
    content = tag.get("content") or ""
    return content if isinstance(content, str) else " ".join(content)


def extract_title(soup: BeautifulSoup) -> str:
    if soup.title is not None:
        title = clean_text(soup.title.get_text())
        if title:
            return title
    heading = soup.find("h1")
    return clean_text(heading.get_text()) if heading is not None else ""


def extract_description(soup: BeautifulSoup) -> str:
    description = _meta_content(soup, name="description") or _meta_content(
        soup, property="og:description"
    )
    return clean_text(description)


def extract_metadata(soup: BeautifulSoup, url: str) -> Metadata:
    return Metadata(url=url, title=extract_title(soup), description=extract_description(soup))
