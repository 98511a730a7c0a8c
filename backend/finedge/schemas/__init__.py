"""
FinEdge - Pydantic Schemas
"""
from finedge.schemas.base import CamelModel, Message
from finedge.schemas.user import (
    UserCreate,
    UserLogin,
    UserResponse,
    UserWithToken,
    ForgotPasswordRequest,
)
from finedge.schemas.market import QuoteResponse, SearchResponse, ChartPoint, StockHistoryResponse
from finedge.schemas.portfolio import HoldingResponse, SectorAllocation, PortfolioResponse, PerformanceResponse
from finedge.schemas.trade import OrderType, TradeRequest, TransactionResponse, TradeResponse, TransactionPage
from finedge.schemas.watchlist import (
    AddSymbolRequest,
    WatchlistItemResponse,
    WatchlistEntry,
    WatchlistAddResponse,
)

__all__ = [
    "CamelModel",
    "Message",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UserWithToken",
    "ForgotPasswordRequest",
    "QuoteResponse",
    "SearchResponse",
    "ChartPoint",
    "StockHistoryResponse",
    "HoldingResponse",
    "SectorAllocation",
    "PortfolioResponse",
    "PerformanceResponse",
    "OrderType",
    "TradeRequest",
    "TransactionResponse",
    "TradeResponse",
    "TransactionPage",
    "AddSymbolRequest",
    "WatchlistItemResponse",
    "WatchlistEntry",
    "WatchlistAddResponse",
]
