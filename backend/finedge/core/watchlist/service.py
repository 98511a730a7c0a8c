"""
FinEdge - Watchlist Service
Business logic for watchlist operations
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from finedge.data_providers.base import QuoteProvider
from finedge.db.models.watchlist import WatchlistItem
from finedge.db.repositories.watchlist import WatchlistRepository
from finedge.utils.exceptions import StockNotFoundError


@dataclass
class WatchlistQuote:
    """Watchlist item with live price data."""
    symbol: str
    name: str
    price: Decimal
    change: Decimal
    change_percent: Decimal


@dataclass
class WatchlistChange:
    """Outcome of an add/remove."""
    message: str
    item: Optional[WatchlistItem] = None


class WatchlistService:
    """Service for watchlist business logic."""

    def __init__(self, db: AsyncSession, quotes: QuoteProvider):
        self.db = db
        self.quotes = quotes
        self.repo = WatchlistRepository(db)

    async def list(self, user_id: int) -> list[WatchlistQuote]:
        """Watchlist joined with live quotes. Unknown symbols show zeros."""
        items = await self.repo.list_by_user(user_id)

        entries = []
        for item in items:
            quote = self.quotes.lookup(item.symbol)
            entries.append(WatchlistQuote(
                symbol=item.symbol,
                name=item.name,
                price=quote.price if quote else Decimal("0"),
                change=quote.change if quote else Decimal("0"),
                change_percent=quote.change_percent if quote else Decimal("0"),
            ))
        return entries

    async def add(self, user_id: int, symbol: str) -> WatchlistChange:
        """
        Add a symbol to the user's watchlist.

        Adding a symbol that is already present changes nothing.

        Raises:
            StockNotFoundError: If the symbol has no quote
        """
        symbol = symbol.strip().upper()
        if await self.repo.get(user_id, symbol):
            return WatchlistChange(message="Already in watchlist")

        quote = self.quotes.lookup(symbol)
        if quote is None:
            raise StockNotFoundError(symbol)

        try:
            item = await self.repo.add(user_id, quote.symbol, quote.name)
            await self.db.commit()
        except IntegrityError:
            # Concurrent add of the same symbol won the unique index
            await self.db.rollback()
            return WatchlistChange(message="Already in watchlist")

        logger.info(f"User {user_id} added {quote.symbol} to watchlist")
        return WatchlistChange(message="Added to watchlist", item=item)

    async def remove(self, user_id: int, symbol: str) -> WatchlistChange:
        """Remove a symbol. Succeeds whether or not it was present."""
        symbol = symbol.strip().upper()
        removed = await self.repo.remove(user_id, symbol)
        await self.db.commit()

        if removed:
            logger.info(f"User {user_id} removed {symbol} from watchlist")
        return WatchlistChange(message="Removed from watchlist")
