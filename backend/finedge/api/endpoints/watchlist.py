"""
FinEdge - Watchlist Endpoints
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from finedge.core.watchlist.service import WatchlistService
from finedge.db.models.user import User
from finedge.dependencies import get_current_user, get_watchlist_service
from finedge.schemas.base import Message
from finedge.schemas.watchlist import (
    AddSymbolRequest,
    WatchlistAddResponse,
    WatchlistEntry,
    WatchlistItemResponse,
)
from finedge.utils.exceptions import NotFoundError, with_status

router = APIRouter()


@router.get("", response_model=list[WatchlistEntry])
async def list_watchlist(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[WatchlistService, Depends(get_watchlist_service)],
):
    """Watchlist with live prices."""
    entries = await service.list(current_user.id)
    return [
        WatchlistEntry(
            symbol=e.symbol,
            name=e.name,
            price=float(e.price),
            change=float(e.change),
            change_percent=float(e.change_percent),
        )
        for e in entries
    ]


@router.post("/add", response_model=WatchlistAddResponse)
async def add_symbol(
    request: AddSymbolRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[WatchlistService, Depends(get_watchlist_service)],
):
    """Add a symbol. Adding an existing symbol is a no-op."""
    try:
        result = await service.add(current_user.id, request.symbol)
    except NotFoundError as e:
        raise with_status(e, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return WatchlistAddResponse(
        message=result.message,
        item=WatchlistItemResponse.model_validate(result.item) if result.item else None,
    )


@router.delete("/remove/{symbol}", response_model=Message)
async def remove_symbol(
    symbol: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[WatchlistService, Depends(get_watchlist_service)],
):
    result = await service.remove(current_user.id, symbol)
    return Message(message=result.message)
