"""
FinEdge - Stock Endpoints
Search, quotes and price history
"""
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from finedge.data_providers.base import Quote, QuoteProvider
from finedge.dependencies import get_quote_provider, get_synthetic_data
from finedge.schemas.market import QuoteResponse, SearchResponse, StockHistoryResponse
from finedge.services.synthetic_data import SyntheticDataGenerator
from finedge.utils.exceptions import InvalidArgumentError, StockNotFoundError

router = APIRouter()


def _require_quote(quotes: QuoteProvider, symbol: Optional[str]) -> Quote:
    if not symbol or not symbol.strip():
        raise InvalidArgumentError("Symbol is required")
    quote = quotes.lookup(symbol.strip())
    if quote is None:
        raise StockNotFoundError(symbol)
    return quote


@router.get("/search", response_model=SearchResponse)
async def search_stocks(
    quotes: Annotated[QuoteProvider, Depends(get_quote_provider)],
    q: Optional[str] = Query(None, description="Symbol or company name fragment"),
):
    if not q or not q.strip():
        raise InvalidArgumentError("Search query is required")
    return SearchResponse(results=[QuoteResponse.from_quote(r) for r in quotes.search(q.strip())])


@router.get("/quote", response_model=QuoteResponse)
async def get_quote_by_query(
    quotes: Annotated[QuoteProvider, Depends(get_quote_provider)],
    symbol: Optional[str] = Query(None),
):
    return QuoteResponse.from_quote(_require_quote(quotes, symbol))


@router.get("/quote/{symbol}", response_model=QuoteResponse)
async def get_quote(
    symbol: str,
    quotes: Annotated[QuoteProvider, Depends(get_quote_provider)],
):
    return QuoteResponse.from_quote(_require_quote(quotes, symbol))


@router.get("/history/{symbol}", response_model=StockHistoryResponse)
async def get_history(
    symbol: str,
    quotes: Annotated[QuoteProvider, Depends(get_quote_provider)],
    synthetic: Annotated[SyntheticDataGenerator, Depends(get_synthetic_data)],
    period: str = Query("1y"),
):
    """Illustrative price history ending at the current quote."""
    quote = _require_quote(quotes, symbol)
    return StockHistoryResponse(
        symbol=quote.symbol,
        name=quote.name,
        period=period,
        data=synthetic.price_history(quote.price, period),
    )
