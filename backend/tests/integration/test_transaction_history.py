"""
Integration Tests - Transaction History Reader
"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
import pytest_asyncio

from finedge.core.trading.history import TransactionFilter, TransactionHistoryReader, total_pages
from finedge.db.models.transaction import TransactionType
from finedge.db.repositories.transaction import TransactionRepository
from finedge.utils.exceptions import InvalidArgumentError


@pytest.fixture
def reader(db_session):
    return TransactionHistoryReader(db_session)


@pytest_asyncio.fixture
async def seeded(db_session, trader):
    """Seven buys and five sells, one day apart; the newest is a sell."""
    ledger = TransactionRepository(db_session)
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for day in range(12):
        kind = TransactionType.BUY if day < 7 else TransactionType.SELL
        await ledger.append(
            user_id=trader.id,
            type=kind,
            symbol="AAPL",
            name="Apple Inc",
            shares=Decimal("1"),
            price=Decimal("100.00") + day,
            total=Decimal("100.00") + day,
            date=start + timedelta(days=day),
        )
    await db_session.commit()
    return trader


def test_total_pages():
    assert total_pages(0, 10) == 0
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2


class TestTransactionHistoryReader:

    @pytest.mark.asyncio
    async def test_first_page_newest_first(self, reader, seeded):
        page = await reader.page(seeded.id, page=1, per_page=5)

        assert page.current_page == 1
        assert page.total_count == 12
        assert page.total_pages == 3
        assert len(page.transactions) == 5
        dates = [t.date for t in page.transactions]
        assert dates == sorted(dates, reverse=True)
        assert page.transactions[0].type == TransactionType.SELL

    @pytest.mark.asyncio
    async def test_huge_page_is_empty(self, reader, seeded):
        page = await reader.page(seeded.id, page=10**19, per_page=10)

        assert page.transactions == []
        assert page.current_page == 10**19
        assert page.total_count == 12
        assert page.total_pages == 2

    @pytest.mark.asyncio
    async def test_last_page_is_partial(self, reader, seeded):
        page = await reader.page(seeded.id, page=3, per_page=5)
        assert len(page.transactions) == 2

    @pytest.mark.asyncio
    async def test_page_beyond_end_is_empty(self, reader, seeded):
        page = await reader.page(seeded.id, page=9, per_page=5)

        assert page.transactions == []
        assert page.total_count == 12
        assert page.total_pages == 3

    @pytest.mark.asyncio
    async def test_filter(self, reader, seeded):
        buys = await reader.page(seeded.id, per_page=10, filter=TransactionFilter.BUY)
        sells = await reader.page(seeded.id, per_page=10, filter="sell")

        assert buys.total_count == 7
        assert all(t.type == TransactionType.BUY for t in buys.transactions)
        assert sells.total_count == 5
        assert sells.total_pages == 1

    @pytest.mark.asyncio
    async def test_unknown_filter_means_all(self, reader, seeded):
        page = await reader.page(seeded.id, per_page=20, filter="dividend")
        assert page.total_count == 12

    @pytest.mark.asyncio
    async def test_empty_history(self, reader, trader):
        page = await reader.page(trader.id)
        assert page.transactions == []
        assert page.total_count == 0
        assert page.total_pages == 0

    @pytest.mark.asyncio
    async def test_invalid_paging(self, reader, trader):
        with pytest.raises(InvalidArgumentError):
            await reader.page(trader.id, page=0)
        with pytest.raises(InvalidArgumentError):
            await reader.page(trader.id, per_page=0)
