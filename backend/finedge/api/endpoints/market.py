"""
FinEdge - Market Endpoints
Public index and mover data
"""
from typing import Annotated

from fastapi import APIRouter, Depends

from finedge.config import settings
from finedge.data_providers.base import QuoteProvider
from finedge.dependencies import get_quote_provider
from finedge.schemas.market import QuoteResponse

router = APIRouter()


@router.get("/overview", response_model=list[QuoteResponse])
async def market_overview(
    quotes: Annotated[QuoteProvider, Depends(get_quote_provider)],
):
    return [QuoteResponse.from_quote(q) for q in quotes.indices()]


@router.get("/movers", response_model=list[QuoteResponse])
async def top_movers(
    quotes: Annotated[QuoteProvider, Depends(get_quote_provider)],
):
    """Largest absolute percentage moves first."""
    return [QuoteResponse.from_quote(q) for q in quotes.top_movers(settings.TOP_MOVERS_LIMIT)]
