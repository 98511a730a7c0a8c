"""
FinEdge - Dependencies
Dependency injection for FastAPI endpoints
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from finedge.core.portfolio.service import PortfolioService
from finedge.core.security import verify_token
from finedge.core.trading.executor import TradeExecutor
from finedge.core.trading.history import TransactionHistoryReader
from finedge.core.watchlist.service import WatchlistService
from finedge.data_providers.base import QuoteProvider
from finedge.data_providers.static_provider import static_quote_provider
from finedge.db.database import get_db
from finedge.db.models.user import User, UserRole
from finedge.db.repositories.user import UserRepository
from finedge.services.synthetic_data import SyntheticDataGenerator
from finedge.utils.exceptions import UnauthenticatedError


# Bearer token scheme; a missing header is handled below so the 401 stays bodiless
bearer_scheme = HTTPBearer(auto_error=False)


def get_quote_provider() -> QuoteProvider:
    """Quote provider dependency. Overridden in tests."""
    return static_quote_provider


def get_synthetic_data() -> SyntheticDataGenerator:
    """Fresh unseeded generator per request."""
    return SyntheticDataGenerator()


async def get_user_repository(
    db: AsyncSession = Depends(get_db)
) -> UserRepository:
    return UserRepository(db)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    user_repo: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Get current authenticated user from the bearer token.

    Raises:
        UnauthenticatedError: If the token is missing, invalid or expired,
            or the user no longer exists
    """
    if credentials is None:
        raise UnauthenticatedError()

    user_id = verify_token(credentials.credentials, token_type="access")
    if user_id is None:
        raise UnauthenticatedError()

    try:
        user = await user_repo.get_by_id(int(user_id))
    except (ValueError, TypeError):
        raise UnauthenticatedError()

    if user is None:
        raise UnauthenticatedError()

    return user


def has_role(user: User, role: UserRole) -> bool:
    """Capability check. Admins pass every role check."""
    return user.role == role or user.role == UserRole.ADMIN


async def get_portfolio_service(
    db: AsyncSession = Depends(get_db),
    quotes: QuoteProvider = Depends(get_quote_provider),
    synthetic: SyntheticDataGenerator = Depends(get_synthetic_data),
) -> PortfolioService:
    return PortfolioService(db, quotes, synthetic=synthetic)


async def get_trade_executor(
    db: AsyncSession = Depends(get_db),
    quotes: QuoteProvider = Depends(get_quote_provider),
) -> TradeExecutor:
    return TradeExecutor(db, quotes)


async def get_history_reader(
    db: AsyncSession = Depends(get_db),
) -> TransactionHistoryReader:
    return TransactionHistoryReader(db)


async def get_watchlist_service(
    db: AsyncSession = Depends(get_db),
    quotes: QuoteProvider = Depends(get_quote_provider),
) -> WatchlistService:
    return WatchlistService(db, quotes)
