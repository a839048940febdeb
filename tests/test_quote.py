# SPDX-License-Identifier: MIT

from typing import Any

import pytest
import requests

from trifecta.service.quote import (
    FALLBACK_QUOTES,
    QuoteClient,
    get_quote,
    parse_quote_response,
)

URL = "https://quotes.example/api/random"


class FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code
        self.ok = status_code < 400

    def json(self) -> Any:
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeQuoteService:
    """Stands in for requests.get, answering with queued responses in order."""

    def __init__(self) -> None:
        self.responses: list[Any] = []
        self.calls: list[tuple[str, float]] = []

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def get(self, url: str, timeout: float) -> FakeResponse:
        self.calls.append((url, timeout))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def service(monkeypatch: pytest.MonkeyPatch) -> FakeQuoteService:
    fake = FakeQuoteService()
    monkeypatch.setattr(requests, "get", fake.get)
    return fake


def test_fetches_and_caches(service: FakeQuoteService) -> None:
    service.queue(FakeResponse([{"q": " Keep going. ", "a": "Someone"}]))
    client = QuoteClient(URL, timeout_seconds=2.5)

    assert client.get_quote() == {"quote": "Keep going.", "author": "Someone"}
    assert client.get_quote() == {"quote": "Keep going.", "author": "Someone"}
    assert service.calls == [(URL, 2.5)]


def test_clear_cache_refetches(service: FakeQuoteService) -> None:
    service.queue(
        FakeResponse([{"q": "One", "a": "A"}]),
        FakeResponse([{"q": "Two", "a": "B"}]),
    )
    client = QuoteClient(URL)

    assert client.get_quote()["quote"] == "One"  # type: ignore[index]
    client.clear_cache()
    assert client.get_quote()["quote"] == "Two"  # type: ignore[index]


def test_expired_cache_refetches(service: FakeQuoteService) -> None:
    service.queue(
        FakeResponse([{"q": "One", "a": "A"}]),
        FakeResponse([{"q": "Two", "a": "B"}]),
    )
    client = QuoteClient(URL, cache_seconds=0)

    client.get_quote()
    assert client.get_quote()["quote"] == "Two"  # type: ignore[index]
    assert len(service.calls) == 2


@pytest.mark.parametrize(
    "response",
    [
        requests.ConnectionError("offline"),
        requests.Timeout("slow"),
        FakeResponse([], status_code=503),
        FakeResponse(ValueError("not json")),
        FakeResponse({"q": "not a list"}),
        FakeResponse([{"a": "No text"}]),
    ],
)
def test_failures_return_none(service: FakeQuoteService, response: Any) -> None:
    service.queue(response)

    assert QuoteClient(URL).get_quote() is None


def test_failure_is_not_cached(service: FakeQuoteService) -> None:
    service.queue(
        requests.ConnectionError("offline"), FakeResponse([{"q": "Back", "a": ""}])
    )
    client = QuoteClient(URL)

    assert client.get_quote() is None
    assert client.get_quote() == {"quote": "Back", "author": ""}


def test_get_quote_falls_back(service: FakeQuoteService) -> None:
    service.queue(requests.ConnectionError("offline"))

    assert get_quote(QuoteClient(URL)) in FALLBACK_QUOTES
    assert get_quote(None) in FALLBACK_QUOTES


def test_parse_quote_response() -> None:
    assert parse_quote_response([{"q": "Hi", "a": None}]) == {"quote": "Hi", "author": ""}
    assert parse_quote_response("nope") is None
    assert parse_quote_response(["nope"]) is None


def test_fallback_table() -> None:
    assert len(FALLBACK_QUOTES) == 10
    assert all(quote["quote"] and quote["author"] for quote in FALLBACK_QUOTES)
