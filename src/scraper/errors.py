"""Scrape error taxonomy and classification of transport failures."""

from __future__ import annotations

import socket

import httpx

GENERIC_MESSAGE = "An unexpected error occurred while scraping."

_NAME_RESOLUTION_HINTS = (
    "name or service not known",
    "nodename nor servname",
    "name resolution",
    "getaddrinfo failed",
    "no address associated",
)


class ScrapeError(Exception):
    """Base class for every failure the scraper reports.

    ``message`` is always safe to show to a user; ``kind`` is a stable
    identifier for logs and tests.
    """

    kind = "unknown"

    def __init__(self, message: str = GENERIC_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(ScrapeError):
    kind = "invalid_input"

    def __init__(self, message: str = "Invalid URL provided") -> None:
        super().__init__(message)


class NetworkFailure(ScrapeError):
    _MESSAGES = {
        "name_resolution": "Website not found. Please check the URL.",
        "connection_refused": "Connection refused. The website may be down.",
        "timeout": "Request timed out. Please try again.",
    }

    def __init__(self, kind: str = "network", detail: str = "") -> None:
        self.kind = kind
        super().__init__(self._MESSAGES.get(kind) or detail or GENERIC_MESSAGE)


class RemoteRejection(ScrapeError):
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        if status_code == 403:
            self.kind = "forbidden"
            message = "Access forbidden. This website blocks automated requests."
        elif status_code == 404:
            self.kind = "not_found"
            message = "Page not found. Please check the URL."
        elif status_code >= 500:
            self.kind = "server_error"
            message = "Server error. Please try again later."
        else:
            self.kind = "http_error"
            message = f"Request failed with status code {status_code}"
        super().__init__(message)


class InsufficientContent(ScrapeError):
    kind = "insufficient_content"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Insufficient content extracted ({length} chars)")


class Exhausted(ScrapeError):
    """All attempts failed and nothing usable was accumulated."""

    kind = "exhausted"

    def __init__(self, last_error: ScrapeError | None) -> None:
        self.last_error = last_error
        super().__init__(last_error.message if last_error else GENERIC_MESSAGE)


def _causes(exc: BaseException):
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _connect_kind(exc: BaseException) -> str:
    for cause in _causes(exc):
        if isinstance(cause, socket.gaierror):
            return "name_resolution"
        if isinstance(cause, ConnectionRefusedError):
            return "connection_refused"
        text = str(cause).lower()
        if any(hint in text for hint in _NAME_RESOLUTION_HINTS):
            return "name_resolution"
        if "connection refused" in text:
            return "connection_refused"
    return "network"


def classify_exception(exc: BaseException) -> ScrapeError:
    """Map an arbitrary exception onto the scrape error taxonomy."""
    if isinstance(exc, ScrapeError):
        return exc
    if isinstance(exc, httpx.TimeoutException):
        return NetworkFailure("timeout")
    if isinstance(exc, httpx.HTTPStatusError):
        return RemoteRejection(exc.response.status_code)
    if isinstance(exc, (httpx.ConnectError, OSError)):
        return NetworkFailure(_connect_kind(exc), str(exc))
    if isinstance(exc, httpx.RequestError):
        return NetworkFailure("network", str(exc))
    return ScrapeError(str(exc) or GENERIC_MESSAGE)
