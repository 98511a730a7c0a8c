"""
FinEdge - Watchlist Schemas
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, ConfigDict

from finedge.schemas.base import CamelModel


class AddSymbolRequest(CamelModel):
    """Request to add symbol to watchlist."""
    symbol: str = Field(..., min_length=1, max_length=20, description="Stock ticker symbol")


class WatchlistItemResponse(CamelModel):
    """Stored watchlist row."""
    id: int
    user_id: int
    symbol: str
    name: str
    added_at: datetime

    model_config = ConfigDict(from_attributes=True)


class WatchlistEntry(CamelModel):
    """Watchlist row joined with live quote data."""
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float


class WatchlistAddResponse(CamelModel):
    """Result of adding a symbol."""
    message: str
    item: Optional[WatchlistItemResponse] = None
