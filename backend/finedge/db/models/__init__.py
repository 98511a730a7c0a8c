"""
FinEdge - Database Models
"""
from finedge.db.models.user import User, UserRole
from finedge.db.models.portfolio import Portfolio
from finedge.db.models.transaction import Transaction, TransactionType
from finedge.db.models.watchlist import WatchlistItem

__all__ = [
    "User",
    "UserRole",
    "Portfolio",
    "Transaction",
    "TransactionType",
    "WatchlistItem",
]
