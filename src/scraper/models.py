"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# Many sites reject requests that do not look like a browser.
DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType({
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "DNT": "1",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
})

_OPTION_FIELDS = ("timeout", "retries", "user_agent", "headers", "min_best_effort_length")


@dataclass(frozen=True)
class ScrapingOptions:
    """Per-call scrape configuration.

    ``timeout`` is in milliseconds and bounds a single fetch only.
    ``retries`` is the maximum number of attempts.
    """

    timeout: int = 10000
    retries: int = 3
    user_agent: str = DEFAULT_USER_AGENT
    headers: Mapping[str, str] = field(default_factory=lambda: DEFAULT_HEADERS)
    min_best_effort_length: int = 1

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.retries < 1:
            raise ValueError("retries must be at least 1")
        if not isinstance(self.headers, MappingProxyType):
            object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def merge(self, overrides: Mapping[str, Any] | None) -> ScrapingOptions:
        """Return a copy with *overrides* applied field-by-field.

        ``None`` values are ignored. Extra headers are layered over the
        current header set, so a caller can add or replace single headers.
        """
        if not overrides:
            return self
        changes: dict[str, Any] = {}
        for name, value in overrides.items():
            if name not in _OPTION_FIELDS:
                raise ValueError(f"Unknown scraping option: {name!r}")
            if value is None:
                continue
            if name == "headers":
                value = {**self.headers, **value}
            changes[name] = value
        return replace(self, **changes)

    def request_headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, **self.headers}


DEFAULT_OPTIONS = ScrapingOptions()


@dataclass(frozen=True)
class Metadata:
    url: str
    title: str = ""
    description: str = ""


@dataclass(frozen=True)
class ExtractionCandidate:
    """A piece of extracted text, compared with others by length only."""

    text: str
    source: str = ""

    @property
    def length(self) -> int:
        return len(self.text)


EMPTY_CANDIDATE = ExtractionCandidate(text="")


@dataclass(frozen=True)
class AttemptOutcome:
    """Content and metadata produced by one successful fetch."""

    content: str
    metadata: Metadata

    @property
    def length(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ScrapingResult:
    success: bool
    content: str | None = None
    error: str | None = None
    metadata: Metadata | None = None

    @classmethod
    def ok(cls, content: str, metadata: Metadata) -> ScrapingResult:
        if not content:
            raise ValueError("successful result requires content")
        return cls(success=True, content=content, metadata=metadata)

    @classmethod
    def failed(cls, error: str, url: str) -> ScrapingResult:
        return cls(success=False, error=error, metadata=Metadata(url=url))
