"""
FinEdge - Market Data Schemas
"""
from finedge.data_providers.base import Quote
from finedge.schemas.base import CamelModel


class QuoteResponse(CamelModel):
    """Stock or index quote."""
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            symbol=quote.symbol,
            name=quote.name,
            price=float(quote.price),
            change=float(quote.change),
            change_percent=float(quote.change_percent),
        )


class SearchResponse(CamelModel):
    """Stock search results."""
    results: list[QuoteResponse]


class ChartPoint(CamelModel):
    """One point of a chart series. Labels are pre-formatted for display."""
    date: str
    value: float


class StockHistoryResponse(CamelModel):
    """Synthetic price history of a stock."""
    symbol: str
    name: str
    period: str
    data: list[ChartPoint]
