# SPDX-License-Identifier: MIT

import logging
import random
from typing import Any, Optional, TypedDict

import pendulum
import requests

from trifecta.model.quote import Quote

logger = logging.getLogger(__name__)

FALLBACK_QUOTES: tuple[Quote, ...] = (
    {
        "quote": "The only way to do great work is to love what you do.",
        "author": "Steve Jobs",
    },
    {"quote": "Stay hungry, stay foolish.", "author": "Steve Jobs"},
    {
        "quote": "Innovation distinguishes between a leader and a follower.",
        "author": "Steve Jobs",
    },
    {
        "quote": "Believe you can and you're halfway there.",
        "author": "Theodore Roosevelt",
    },
    {
        "quote": "It does not matter how slowly you go as long as you do not stop.",
        "author": "Confucius",
    },
    {
        "quote": "Everything you've ever wanted is on the other side of fear.",
        "author": "George Addair",
    },
    {
        "quote": "Success is not final, failure is not fatal: it is the courage "
        "to continue that counts.",
        "author": "Winston Churchill",
    },
    {
        "quote": "The future belongs to those who believe in the beauty of their dreams.",
        "author": "Eleanor Roosevelt",
    },
    {
        "quote": "You miss 100% of the shots you don't take.",
        "author": "Wayne Gretzky",
    },
    {
        "quote": "Hardships often prepare ordinary people for an extraordinary destiny.",
        "author": "C.S. Lewis",
    },
)


class CachedQuote(TypedDict):
    quote: Quote
    fetched: pendulum.DateTime


class QuoteClient:
    """Fetch quotes from a remote service, reusing a result for ``cache_seconds``."""

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 5.0,
        cache_seconds: int = 3600,
    ) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.cache_seconds = cache_seconds
        self._cached: Optional[CachedQuote] = None

    def get_quote(self) -> Optional[Quote]:
        """Return a cached or freshly fetched quote; None when the service fails."""
        now = pendulum.now("UTC")
        cached = self._cached
        if cached is not None and (now - cached["fetched"]).in_seconds() < (
            self.cache_seconds
        ):
            return cached["quote"]

        quote = self.__fetch()
        if quote is not None:
            # Replaced as a whole so concurrent readers never see a partial entry
            self._cached = {"quote": quote, "fetched": now}
        return quote

    def clear_cache(self) -> None:
        self._cached = None

    def __fetch(self) -> Optional[Quote]:
        try:
            response = requests.get(self.url, timeout=self.timeout_seconds)
        except requests.RequestException as e:
            logger.warning("Error fetching quote: %s", e)
            return None

        if not response.ok:
            logger.warning("Quote service returned HTTP %s", response.status_code)
            return None

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Quote service returned invalid JSON: %s", e)
            return None

        quote = parse_quote_response(data)
        if quote is None:
            logger.warning("Quote service returned an unexpected payload")
        return quote


def parse_quote_response(data: Any) -> Optional[Quote]:
    """Extract a quote from a zenquotes-style payload: [{"q": ..., "a": ...}]."""
    if not isinstance(data, list) or len(data) == 0:
        return None
    first = data[0]
    if not isinstance(first, dict):
        return None
    text = first.get("q")
    author = first.get("a")
    if not isinstance(text, str) or not text.strip():
        return None
    return {
        "quote": text.strip(),
        "author": author.strip() if isinstance(author, str) else "",
    }


def get_fallback_quote(rng: Optional[random.Random] = None) -> Quote:
    chooser = rng if rng is not None else random
    return chooser.choice(FALLBACK_QUOTES)


def get_quote(client: Optional[QuoteClient]) -> Quote:
    """Quote for the day view: remote when possible, built-in table otherwise."""
    quote = client.get_quote() if client is not None else None
    if quote is None:
        return get_fallback_quote()
    return quote
