"""
FinEdge - Transaction Repository

The ledger: append-only storage of executed trades. There is no
update or delete operation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional, List, Tuple

from sqlalchemy import select, func, desc
from sqlalchemy.ext.asyncio import AsyncSession

from finedge.db.database import utc_now
from finedge.db.models.transaction import Transaction, TransactionType


class TransactionRepository:
    """
    Transaction Repository

    Handles ledger operations:
    - Appending executed trades
    - Full history per user (chronological)
    - Paginated history (newest first)
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    # ==================== CREATE ====================

    async def append(
        self,
        user_id: int,
        type: TransactionType,
        symbol: str,
        name: str,
        shares: Decimal,
        price: Decimal,
        total: Decimal,
        date: Optional[datetime] = None,
    ) -> Transaction:
        """Store one executed trade. Committing is left to the caller."""
        entry = Transaction(
            user_id=user_id,
            type=type,
            symbol=symbol,
            name=name,
            shares=shares,
            price=price,
            total=total,
            date=date or utc_now(),
        )
        self.db.add(entry)
        await self.db.flush()
        return entry

    # ==================== READ ====================

    async def list_by_user(
        self,
        user_id: int,
        symbol: Optional[str] = None,
    ) -> List[Transaction]:
        """
        Get a user's transactions in chronological order.

        Args:
            user_id: Owner of the transactions
            symbol: Optional symbol filter (case-insensitive)

        Returns:
            Transactions ordered by date, then insertion id
        """
        query = select(Transaction).where(Transaction.user_id == user_id)

        if symbol:
            query = query.where(Transaction.symbol == symbol.upper())

        query = query.order_by(Transaction.date, Transaction.id)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count_by_user(
        self,
        user_id: int,
        type: Optional[TransactionType] = None,
    ) -> int:
        """Count a user's transactions, optionally of one type."""
        query = select(func.count(Transaction.id)).where(Transaction.user_id == user_id)
        if type is not None:
            query = query.where(Transaction.type == type)

        result = await self.db.execute(query)
        return int(result.scalar_one())

    async def page(
        self,
        user_id: int,
        page: int,
        per_page: int,
        type: Optional[TransactionType] = None,
    ) -> Tuple[List[Transaction], int]:
        """
        Get one page of a user's transactions, newest first.

        Args:
            user_id: Owner of the transactions
            page: 1-based page number
            per_page: Page size
            type: Optional BUY/SELL filter

        Returns:
            Tuple of (transactions on the page, total matching count)
        """
        total = await self.count_by_user(user_id, type)

        # Out-of-range pages skip the query
        offset = (page - 1) * per_page
        if offset >= total:
            return [], total

        query = select(Transaction).where(Transaction.user_id == user_id)
        if type is not None:
            query = query.where(Transaction.type == type)

        query = (
            query.order_by(desc(Transaction.date), desc(Transaction.id))
            .limit(min(per_page, total - offset))
            .offset(offset)
        )

        result = await self.db.execute(query)
        return list(result.scalars().all()), total
