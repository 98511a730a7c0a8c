"""
FinEdge - Portfolio Repository
"""
from decimal import Decimal
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from finedge.db.database import utc_now
from finedge.db.models.portfolio import Portfolio


class PortfolioRepository:
    """Repository for the per-user cash account."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user(self, user_id: int, for_update: bool = False) -> Optional[Portfolio]:
        """
        Get a user's portfolio.

        Args:
            user_id: Owner ID
            for_update: Lock the row until the current transaction ends

        Returns:
            Portfolio if the user has one, None otherwise
        """
        query = select(Portfolio).where(Portfolio.user_id == user_id).execution_options(
            populate_existing=True
        )
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def create(self, user_id: int, cash_balance: Decimal) -> Portfolio:
        """Open a portfolio with its seed cash."""
        portfolio = Portfolio(user_id=user_id, cash_balance=cash_balance)
        self.session.add(portfolio)
        await self.session.flush()
        return portfolio

    async def debit(self, portfolio_id: int, amount: Decimal) -> bool:
        """
        Subtract amount from the cash balance if it covers it.

        The balance check is part of the UPDATE statement, so two concurrent
        debits can never both succeed against the same cash.

        Returns:
            True if a row was updated
        """
        result = await self.session.execute(
            update(Portfolio)
            .where(Portfolio.id == portfolio_id, Portfolio.cash_balance >= amount)
            .values(cash_balance=Portfolio.cash_balance - amount, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def credit(self, portfolio_id: int, amount: Decimal) -> bool:
        """Add amount to the cash balance."""
        result = await self.session.execute(
            update(Portfolio)
            .where(Portfolio.id == portfolio_id)
            .values(cash_balance=Portfolio.cash_balance + amount, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
