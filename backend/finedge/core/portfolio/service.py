"""
FinEdge - Portfolio Service

Loads a portfolio and its ledger, runs the valuation engine and attaches the
synthetic display data.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from finedge.config import settings
from finedge.core.portfolio.valuation import PortfolioValuation, value_portfolio
from finedge.data_providers.base import QuoteProvider
from finedge.db.models.portfolio import Portfolio
from finedge.db.repositories.portfolio import PortfolioRepository
from finedge.db.repositories.transaction import TransactionRepository
from finedge.services.synthetic_data import SyntheticDataGenerator
from finedge.utils.exceptions import PortfolioNotFoundError


# Days covered by the performance endpoint
PERFORMANCE_DAYS = 365


@dataclass
class PortfolioView:
    """Ledger-derived valuation plus illustrative chart data."""
    portfolio: Portfolio
    valuation: PortfolioValuation
    today_change: Decimal
    today_change_percent: Decimal
    performance_data: dict[str, list[dict]]
    allocation: list[dict]


class PortfolioService:
    """Read side of the portfolio."""

    def __init__(
        self,
        db: AsyncSession,
        quotes: QuoteProvider,
        synthetic: Optional[SyntheticDataGenerator] = None,
        initial_deposit: Optional[Decimal] = None,
    ):
        self.db = db
        self.quotes = quotes
        self.synthetic = synthetic or SyntheticDataGenerator()
        self.initial_deposit = initial_deposit if initial_deposit is not None else settings.INITIAL_DEPOSIT
        self.portfolios = PortfolioRepository(db)
        self.ledger = TransactionRepository(db)

    async def _require_portfolio(self, user_id: int) -> Portfolio:
        portfolio = await self.portfolios.get_by_user(user_id)
        if portfolio is None:
            raise PortfolioNotFoundError()
        return portfolio

    async def valuate(self, user_id: int) -> tuple[Portfolio, PortfolioValuation]:
        """
        Value a user's portfolio from the ledger.

        Raises:
            PortfolioNotFoundError: If the user has no portfolio
        """
        portfolio = await self._require_portfolio(user_id)
        entries = await self.ledger.list_by_user(user_id)
        valuation = value_portfolio(
            cash_balance=portfolio.cash_balance,
            entries=entries,
            quotes=self.quotes,
            initial_deposit=self.initial_deposit,
        )
        return portfolio, valuation

    async def get_portfolio(self, user_id: int) -> PortfolioView:
        """Full portfolio view for the dashboard."""
        portfolio, valuation = await self.valuate(user_id)

        today_change, today_change_percent = self.synthetic.daily_change(valuation.total_value)

        logger.debug(
            f"Valued portfolio of user {user_id}: {len(valuation.holdings)} holdings, "
            f"total {valuation.total_value}"
        )

        return PortfolioView(
            portfolio=portfolio,
            valuation=valuation,
            today_change=today_change,
            today_change_percent=today_change_percent,
            performance_data=self.synthetic.performance_data(valuation.total_value),
            allocation=self.synthetic.sector_allocation(),
        )

    async def get_performance(self, user_id: int) -> list[dict]:
        """One-year illustrative series anchored at the cash balance."""
        portfolio = await self._require_portfolio(user_id)
        return self.synthetic.performance_series(portfolio.cash_balance, PERFORMANCE_DAYS)
