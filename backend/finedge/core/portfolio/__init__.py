"""
Portfolio Module

Ledger-driven valuation: holdings, cost basis, gain/loss and totals.
"""
from finedge.core.portfolio.valuation import (
    Position,
    Holding,
    PortfolioValuation,
    accumulate_positions,
    owned_shares,
    value_position,
    value_holdings,
    value_portfolio,
)

__all__ = [
    "Position",
    "Holding",
    "PortfolioValuation",
    "accumulate_positions",
    "owned_shares",
    "value_position",
    "value_holdings",
    "value_portfolio",
]
