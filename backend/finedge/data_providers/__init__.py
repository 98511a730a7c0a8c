"""
FinEdge - Market Data Providers
"""
from finedge.data_providers.base import Quote, QuoteProvider
from finedge.data_providers.static_provider import (
    StaticQuoteProvider,
    static_quote_provider,
    STOCK_QUOTES,
    MARKET_INDICES,
)

__all__ = [
    "Quote",
    "QuoteProvider",
    "StaticQuoteProvider",
    "static_quote_provider",
    "STOCK_QUOTES",
    "MARKET_INDICES",
]
