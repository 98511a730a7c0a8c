"""
FinEdge - Data Repositories

Repository pattern implementations for database operations.
"""
from finedge.db.repositories.user import UserRepository
from finedge.db.repositories.portfolio import PortfolioRepository
from finedge.db.repositories.transaction import TransactionRepository
from finedge.db.repositories.watchlist import WatchlistRepository

__all__ = [
    "UserRepository",
    "PortfolioRepository",
    "TransactionRepository",
    "WatchlistRepository",
]
