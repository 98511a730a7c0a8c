"""
FinEdge - Transaction History

Paginated, filtered read view over the ledger.
"""
from dataclasses import dataclass
from enum import Enum
import math

from sqlalchemy.ext.asyncio import AsyncSession

from finedge.db.models.transaction import Transaction, TransactionType
from finedge.db.repositories.transaction import TransactionRepository
from finedge.utils.exceptions import InvalidArgumentError


class TransactionFilter(str, Enum):
    """History filter."""
    ALL = "all"
    BUY = "buy"
    SELL = "sell"

    @classmethod
    def parse(cls, value) -> "TransactionFilter":
        """Anything other than buy or sell means all."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower()) if value is not None else cls.ALL
        except ValueError:
            return cls.ALL

    @property
    def transaction_type(self) -> TransactionType | None:
        if self is TransactionFilter.ALL:
            return None
        return TransactionType(self.value)


@dataclass
class HistoryPage:
    """One page of history plus pagination counters."""
    transactions: list[Transaction]
    current_page: int
    total_pages: int
    total_count: int


def total_pages(total_count: int, per_page: int) -> int:
    return math.ceil(total_count / per_page)


class TransactionHistoryReader:
    """Newest-first history pages for a user."""

    def __init__(self, db: AsyncSession):
        self.ledger = TransactionRepository(db)

    async def page(
        self,
        user_id: int,
        page: int = 1,
        per_page: int = 10,
        filter: TransactionFilter | str = TransactionFilter.ALL,
    ) -> HistoryPage:
        """
        Get one page of history.

        A page past the end is not an error: it comes back empty with the
        real counts.

        Raises:
            InvalidArgumentError: If page or per_page is below 1
        """
        if page < 1:
            raise InvalidArgumentError("Page must be at least 1")
        if per_page < 1:
            raise InvalidArgumentError("perPage must be at least 1")

        transactions, total_count = await self.ledger.page(
            user_id=user_id,
            page=page,
            per_page=per_page,
            type=TransactionFilter.parse(filter).transaction_type,
        )

        return HistoryPage(
            transactions=transactions,
            current_page=page,
            total_pages=total_pages(total_count, per_page),
            total_count=total_count,
        )
