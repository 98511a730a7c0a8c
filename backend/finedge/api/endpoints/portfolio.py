"""
FinEdge - Portfolio Endpoints
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from finedge.core.portfolio.service import PortfolioService
from finedge.db.models.user import User
from finedge.dependencies import get_current_user, get_portfolio_service
from finedge.schemas.portfolio import (
    HoldingResponse,
    PerformanceResponse,
    PortfolioResponse,
)
from finedge.utils.exceptions import NotFoundError, with_status

router = APIRouter()


@router.get("", response_model=PortfolioResponse)
async def get_portfolio(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PortfolioService, Depends(get_portfolio_service)],
):
    """Portfolio with ledger-derived holdings and totals."""
    try:
        view = await service.get_portfolio(current_user.id)
    except NotFoundError as e:
        raise with_status(e, status.HTTP_500_INTERNAL_SERVER_ERROR)

    portfolio = view.portfolio
    valuation = view.valuation
    return PortfolioResponse(
        id=portfolio.id,
        user_id=portfolio.user_id,
        cash_balance=float(valuation.cash_balance),
        created_at=portfolio.created_at,
        updated_at=portfolio.updated_at,
        holdings=[HoldingResponse.from_holding(h) for h in valuation.holdings],
        total_value=float(valuation.total_value),
        total_return=float(valuation.total_return),
        total_return_percent=float(valuation.total_return_percent),
        today_change=float(view.today_change),
        today_change_percent=float(view.today_change_percent),
        performance_data=view.performance_data,
        allocation=view.allocation,
    )


@router.get("/performance", response_model=PerformanceResponse)
async def get_performance(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PortfolioService, Depends(get_portfolio_service)],
):
    """Illustrative one-year performance series."""
    try:
        data = await service.get_performance(current_user.id)
    except NotFoundError as e:
        raise with_status(e, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return PerformanceResponse(data=data)
