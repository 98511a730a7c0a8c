"""
FinEdge - Transaction History Endpoints
"""
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from finedge.config import settings
from finedge.core.trading.history import TransactionFilter, TransactionHistoryReader
from finedge.db.models.user import User
from finedge.dependencies import get_current_user, get_history_reader
from finedge.schemas.trade import TransactionPage, TransactionResponse

router = APIRouter()


@router.get("", response_model=TransactionPage)
async def list_transactions(
    current_user: Annotated[User, Depends(get_current_user)],
    reader: Annotated[TransactionHistoryReader, Depends(get_history_reader)],
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, alias="perPage", ge=1),
    filter: Optional[str] = Query(None, description="buy, sell or all (default)"),
):
    """Newest-first history, optionally filtered to buys or sells."""
    history = await reader.page(
        user_id=current_user.id,
        page=page,
        per_page=per_page or settings.DEFAULT_PAGE_SIZE,
        filter=TransactionFilter.parse(filter),
    )
    return TransactionPage(
        transactions=[TransactionResponse.from_model(t) for t in history.transactions],
        current_page=history.current_page,
        total_pages=history.total_pages,
        total_count=history.total_count,
    )
