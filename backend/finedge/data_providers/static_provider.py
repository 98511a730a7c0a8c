"""
Static Quote Provider

Fixed in-memory market snapshot used for paper trading. The table is built
once at import time from immutable Quote records.
"""
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from finedge.data_providers.base import Quote, QuoteProvider


def _q(symbol: str, name: str, price: str, change: str, change_percent: str) -> Quote:
    return Quote(
        symbol=symbol,
        name=name,
        price=Decimal(price),
        change=Decimal(change),
        change_percent=Decimal(change_percent),
    )


MARKET_INDICES: tuple[Quote, ...] = (
    _q("SPX", "S&P 500", "4587.64", "56.23", "1.23"),
    _q("COMP", "NASDAQ", "14346.21", "124.81", "0.87"),
    _q("DJI", "DOW JONES", "35084.53", "-147.35", "-0.42"),
    _q("RUT", "RUSSELL 2000", "2287.55", "14.41", "0.63"),
)

STOCK_QUOTES: tuple[Quote, ...] = (
    _q("AAPL", "Apple Inc", "145.86", "3.42", "2.40"),
    _q("MSFT", "Microsoft Corp", "286.22", "3.56", "1.26"),
    _q("AMZN", "Amazon.com Inc", "3340.45", "17.71", "0.53"),
    _q("GOOGL", "Alphabet Inc", "2704.42", "-23.71", "-0.87"),
    _q("META", "Meta Platforms Inc", "312.46", "4.83", "1.57"),
    _q("TSLA", "Tesla Inc", "765.34", "53.12", "7.45"),
    _q("NFLX", "Netflix Inc", "532.11", "-18.05", "-3.28"),
    _q("JPM", "JPMorgan Chase & Co", "141.32", "0.87", "0.62"),
    _q("V", "Visa Inc", "232.65", "1.15", "0.50"),
    _q("DIS", "Walt Disney Co", "178.23", "-4.59", "-2.51"),
    _q("NVDA", "NVIDIA Corp", "194.59", "8.34", "4.48"),
    _q("PG", "Procter & Gamble Co", "142.37", "-0.18", "-0.13"),
    _q("HD", "Home Depot Inc", "321.54", "3.18", "1.00"),
    _q("PYPL", "PayPal Holdings Inc", "278.11", "-12.43", "-4.28"),
    _q("INTC", "Intel Corp", "54.83", "-1.25", "-2.23"),
    _q("ADBE", "Adobe Inc", "613.82", "6.92", "1.14"),
)


class StaticQuoteProvider(QuoteProvider):
    """Quote provider backed by a fixed table."""

    name = "static"

    def __init__(
        self,
        quotes: Iterable[Quote] = STOCK_QUOTES,
        indices: Iterable[Quote] = MARKET_INDICES,
    ):
        self._quotes = tuple(quotes)
        self._indices = tuple(indices)
        self._by_symbol = {q.symbol.upper(): q for q in self._quotes}

    def lookup(self, symbol: str) -> Optional[Quote]:
        if not symbol:
            return None
        return self._by_symbol.get(symbol.strip().upper())

    def quotes(self) -> Sequence[Quote]:
        return self._quotes

    def indices(self) -> Sequence[Quote]:
        return self._indices


# Shared read-only instance
static_quote_provider = StaticQuoteProvider()
