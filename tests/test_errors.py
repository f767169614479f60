"""Error taxonomy and classification tests."""

import socket

import httpx
import pytest

from src.scraper.errors import (
    GENERIC_MESSAGE,
    Exhausted,
    InsufficientContent,
    InvalidInput,
    NetworkFailure,
    RemoteRejection,
    ScrapeError,
    classify_exception,
)


def _chained(outer: type[Exception], inner: BaseException) -> Exception:
    try:
        try:
            raise inner
        except BaseException as cause:
            raise outer("connect failed") from cause
    except outer as exc:
        return exc


def test_name_resolution_from_gaierror_cause():
    error = classify_exception(_chained(httpx.ConnectError, socket.gaierror(-2, "Name or service not known")))
    assert error.kind == "name_resolution"
    assert error.message == "Website not found. Please check the URL."


def test_connection_refused_from_os_error():
    error = classify_exception(ConnectionRefusedError(111, "Connection refused"))
    assert error.kind == "connection_refused"
    assert error.message == "Connection refused. The website may be down."


def test_timeout():
    assert classify_exception(httpx.PoolTimeout("pool")).kind == "timeout"


def test_http_status_error():
    request = httpx.Request("GET", "https://example.com")
    response = httpx.Response(404, request=request)
    error = classify_exception(httpx.HTTPStatusError("nf", request=request, response=response))
    assert isinstance(error, RemoteRejection)
    assert error.kind == "not_found"


def test_other_transport_error_keeps_detail():
    error = classify_exception(httpx.RemoteProtocolError("peer closed connection"))
    assert error.kind == "network"
    assert error.message == "peer closed connection"


def test_scrape_errors_pass_through():
    original = NetworkFailure("timeout")
    assert classify_exception(original) is original


def test_unknown_exception_uses_its_message_or_generic():
    assert classify_exception(RuntimeError("boom")).message == "boom"
    assert classify_exception(RuntimeError()).message == GENERIC_MESSAGE


@pytest.mark.parametrize(
    "error, kind",
    [
        (InvalidInput(), "invalid_input"),
        (InsufficientContent(12), "insufficient_content"),
        (RemoteRejection(502), "server_error"),
        (NetworkFailure(), "network"),
    ],
)
def test_kinds(error: ScrapeError, kind: str):
    assert error.kind == kind
    assert error.message


def test_exhausted_carries_last_message():
    assert Exhausted(NetworkFailure("timeout")).message == "Request timed out. Please try again."
    assert Exhausted(None).message == GENERIC_MESSAGE
