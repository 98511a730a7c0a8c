"""
FinEdge - Watchlist Repository
"""
from typing import Optional, List

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from finedge.db.database import utc_now
from finedge.db.models.watchlist import WatchlistItem


class WatchlistRepository:
    """Repository for (user, symbol) watchlist rows."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: int, symbol: str) -> Optional[WatchlistItem]:
        result = await self.session.execute(
            select(WatchlistItem).where(
                WatchlistItem.user_id == user_id,
                WatchlistItem.symbol == symbol.upper(),
            )
        )
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: int) -> List[WatchlistItem]:
        """Items in the order they were added."""
        result = await self.session.execute(
            select(WatchlistItem)
            .where(WatchlistItem.user_id == user_id)
            .order_by(WatchlistItem.added_at, WatchlistItem.id)
        )
        return list(result.scalars().all())

    async def add(self, user_id: int, symbol: str, name: str) -> WatchlistItem:
        item = WatchlistItem(
            user_id=user_id,
            symbol=symbol.upper(),
            name=name,
            added_at=utc_now(),
        )
        self.session.add(item)
        await self.session.flush()
        return item

    async def remove(self, user_id: int, symbol: str) -> int:
        """Delete the item if present. Returns number of rows removed."""
        result = await self.session.execute(
            delete(WatchlistItem).where(
                WatchlistItem.user_id == user_id,
                WatchlistItem.symbol == symbol.upper(),
            )
        )
        return result.rowcount
