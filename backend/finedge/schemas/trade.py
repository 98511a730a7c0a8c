"""
FinEdge - Trade Schemas
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from finedge.core.trading.orders import OrderType
from finedge.db.models.transaction import Transaction, TransactionType
from finedge.schemas.base import CamelModel


class TradeRequest(CamelModel):
    """Buy or sell request."""
    symbol: str = Field(..., min_length=1, max_length=20, description="Stock symbol")
    shares: Decimal = Field(..., description="Number of shares")
    order_type: OrderType = Field(default=OrderType.MARKET, description="Order type")
    price: Optional[Decimal] = Field(None, description="Limit price (informational)")


class TransactionResponse(CamelModel):
    """Ledger entry."""
    id: int
    user_id: int
    type: TransactionType
    symbol: str
    name: str
    shares: float
    price: float
    total: float
    date: datetime

    @classmethod
    def from_model(cls, entry: Transaction) -> "TransactionResponse":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            type=entry.type,
            symbol=entry.symbol,
            name=entry.name,
            shares=float(entry.shares),
            price=float(entry.price),
            total=float(entry.total),
            date=entry.date,
        )


class TradeResponse(CamelModel):
    """Result of an executed trade."""
    message: str
    transaction: TransactionResponse


class TransactionPage(CamelModel):
    """Paginated transaction history."""
    transactions: list[TransactionResponse]
    current_page: int
    total_pages: int
    total_count: int
