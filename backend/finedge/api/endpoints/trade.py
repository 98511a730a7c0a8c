"""
FinEdge - Trade Endpoints
Buy and sell at the current quote. Every rejected trade is a 400.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from finedge.core.trading.executor import TradeExecutor, TradeResult
from finedge.db.models.user import User
from finedge.dependencies import get_current_user, get_trade_executor
from finedge.schemas.trade import TradeRequest, TradeResponse, TransactionResponse
from finedge.utils.exceptions import FinEdgeException, with_status

router = APIRouter()


def _to_response(result: TradeResult) -> TradeResponse:
    return TradeResponse(
        message=result.message,
        transaction=TransactionResponse.from_model(result.transaction),
    )


@router.post("/buy", response_model=TradeResponse)
async def buy(
    order: TradeRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    executor: Annotated[TradeExecutor, Depends(get_trade_executor)],
):
    try:
        result = await executor.buy(
            user_id=current_user.id,
            symbol=order.symbol,
            shares=order.shares,
            order_type=order.order_type,
            limit_price=order.price,
        )
    except FinEdgeException as e:
        raise with_status(e, status.HTTP_400_BAD_REQUEST)
    return _to_response(result)


@router.post("/sell", response_model=TradeResponse)
async def sell(
    order: TradeRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    executor: Annotated[TradeExecutor, Depends(get_trade_executor)],
):
    try:
        result = await executor.sell(
            user_id=current_user.id,
            symbol=order.symbol,
            shares=order.shares,
            order_type=order.order_type,
            limit_price=order.price,
        )
    except FinEdgeException as e:
        raise with_status(e, status.HTTP_400_BAD_REQUEST)
    return _to_response(result)
