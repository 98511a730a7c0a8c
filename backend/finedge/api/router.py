"""
FinEdge - API Router
"""
from fastapi import APIRouter

from finedge.api.endpoints import (
    auth, portfolio, watchlist, trade, transactions, market, stock
)

api_router = APIRouter()


api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(portfolio.router, prefix="/portfolio", tags=["Portfolio"])
api_router.include_router(watchlist.router, prefix="/watchlist", tags=["Watchlist"])
api_router.include_router(trade.router, prefix="/trade", tags=["Trading"])
api_router.include_router(transactions.router, prefix="/transactions", tags=["Transactions"])
api_router.include_router(market.router, prefix="/market", tags=["Market"])
api_router.include_router(stock.router, prefix="/stock", tags=["Stocks"])
