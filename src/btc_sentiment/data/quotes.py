"""Live Bitcoin price/volume lookup with sequential fallback across public APIs.

Tries CoinGecko, then CryptoCompare, then Blockchain.info, and returns the
first quote that parses. When every source fails, a configured sample quote
is returned (flagged ``is_sample``) so the user still has editable values.
Uses urllib.request (stdlib) like the other public-API lookups here.
"""

import json
import time
import urllib.request
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from btc_sentiment.config import QuoteSettings
from btc_sentiment.exceptions import QuoteUnavailableError
from btc_sentiment.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LiveQuote:
    """Current BTC/USD price and 24h volume from one source."""

    source: str
    price: float
    volume: float
    change_24h: float | None = None  # Percent; None when the source has none
    is_sample: bool = False
    fetched_at: float = field(default_factory=time.time)


@dataclass(frozen=True)
class QuoteSource:
    """A public endpoint plus the function that extracts price/volume/change."""

    name: str
    url: str
    parse: Callable[[Any], tuple[float, float, float | None]]


def _parse_coingecko(data: Any) -> tuple[float, float, float | None]:
    btc = data["bitcoin"]
    return float(btc["usd"]), float(btc["usd_24h_vol"]), float(btc["usd_24h_change"])


def _parse_cryptocompare(data: Any) -> tuple[float, float, float | None]:
    raw = data["RAW"]["BTC"]["USD"]
    return float(raw["PRICE"]), float(raw["VOLUME24HOURTO"]), float(raw["CHANGEPCT24HOUR"])


def _parse_blockchain_info(data: Any) -> tuple[float, float, float | None]:
    usd = data["USD"]
    # No volume field: approximate 24h volume from the 15-minute price
    volume = float(usd["15m"]) * 144 * 1_000_000
    return float(usd["last"]), volume, None


DEFAULT_SOURCES: tuple[QuoteSource, ...] = (
    QuoteSource(
        name="CoinGecko",
        url=(
            "https://api.coingecko.com/api/v3/simple/price"
            "?ids=bitcoin&vs_currencies=usd&include_24hr_vol=true&include_24hr_change=true"
        ),
        parse=_parse_coingecko,
    ),
    QuoteSource(
        name="CryptoCompare",
        url="https://min-api.cryptocompare.com/data/pricemultifull?fsyms=BTC&tsyms=USD",
        parse=_parse_cryptocompare,
    ),
    QuoteSource(
        name="Blockchain.info",
        url="https://blockchain.info/ticker",
        parse=_parse_blockchain_info,
    ),
)


class QuoteService:
    """Fetches a live BTC quote, falling back source by source.

    Args:
        settings: Timeout and sample-quote configuration.
        sources: Ordered sources to try (defaults to DEFAULT_SOURCES).
    """

    def __init__(
        self,
        settings: QuoteSettings,
        sources: tuple[QuoteSource, ...] = DEFAULT_SOURCES,
    ) -> None:
        self._settings = settings
        self._sources = sources

    def _fetch_from(self, source: QuoteSource) -> LiveQuote:
        """Fetch and parse one source.

        Raises:
            QuoteUnavailableError: On any transport, decoding or shape error.
        """
        headers = {"Accept": "application/json", "User-Agent": "btc-sentiment/1.0"}
        req = urllib.request.Request(source.url, headers=headers, method="GET")
        try:
            with urllib.request.urlopen(req, timeout=self._settings.timeout_seconds) as resp:
                data = json.loads(resp.read())
            price, volume, change = source.parse(data)
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise QuoteUnavailableError(f"{source.name}: {e}") from e

        return LiveQuote(source=source.name, price=price, volume=volume, change_24h=change)

    def sample_quote(self) -> LiveQuote:
        """Return the configured fallback values."""
        return LiveQuote(
            source="sample",
            price=self._settings.sample_price,
            volume=self._settings.sample_volume,
            is_sample=True,
        )

    def fetch_live_quote(self) -> LiveQuote:
        """Return the first successful quote, or the sample quote if all fail."""
        if not self._settings.enabled:
            return self.sample_quote()

        for source in self._sources:
            logger.debug("quote_source_trying", source=source.name)
            try:
                quote = self._fetch_from(source)
            except QuoteUnavailableError as e:
                logger.warning("quote_source_failed", source=source.name, error=str(e))
                continue
            logger.info("quote_fetched", source=source.name, price=round(quote.price))
            return quote

        logger.error("quote_sources_exhausted", sources=len(self._sources))
        return self.sample_quote()
