"""
FinEdge - Portfolio Schemas
"""
from datetime import datetime

from finedge.core.portfolio.valuation import Holding
from finedge.schemas.base import CamelModel
from finedge.schemas.market import ChartPoint


class HoldingResponse(CamelModel):
    """Valued holding."""
    symbol: str
    name: str
    shares: float
    cost_basis: float
    current_price: float
    market_value: float
    avg_cost: float
    gain_loss: float
    gain_loss_percent: float

    @classmethod
    def from_holding(cls, holding: Holding) -> "HoldingResponse":
        return cls(
            symbol=holding.symbol,
            name=holding.name,
            shares=float(holding.shares),
            cost_basis=float(holding.cost_basis),
            current_price=float(holding.current_price),
            market_value=float(holding.market_value),
            avg_cost=float(holding.avg_cost),
            gain_loss=float(holding.gain_loss),
            gain_loss_percent=float(holding.gain_loss_percent),
        )


class SectorAllocation(CamelModel):
    """Illustrative sector weight."""
    sector: str
    percentage: int


class PortfolioResponse(CamelModel):
    """
    Portfolio view.

    todayChange, performanceData and allocation are synthetic display data;
    every other figure is derived from the ledger.
    """
    id: int
    user_id: int
    cash_balance: float
    created_at: datetime
    updated_at: datetime
    holdings: list[HoldingResponse]
    total_value: float
    total_return: float
    total_return_percent: float
    today_change: float
    today_change_percent: float
    performance_data: dict[str, list[ChartPoint]]
    allocation: list[SectorAllocation]


class PerformanceResponse(CamelModel):
    """One-year synthetic performance series."""
    data: list[ChartPoint]
