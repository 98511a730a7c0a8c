"""
Unit Tests - Database Models
Tests for SQLAlchemy models structure and enums.
"""
from datetime import timezone

from finedge.db.database import utc_now
from finedge.db.models import (
    Portfolio,
    Transaction,
    TransactionType,
    User,
    UserRole,
    WatchlistItem,
)


class TestUserModel:

    def test_role_values(self):
        assert UserRole.USER.value == "user"
        assert UserRole.ADMIN.value == "admin"

    def test_is_admin(self):
        assert User(username="root", hashed_password="x", role=UserRole.ADMIN).is_admin is True
        assert User(username="bob", hashed_password="x", role=UserRole.USER).is_admin is False

    def test_username_is_unique(self):
        assert User.__table__.c.username.unique is True


class TestPortfolioModel:

    def test_one_portfolio_per_user(self):
        assert Portfolio.__table__.c.user_id.unique is True

    def test_cash_is_two_decimal_numeric(self):
        assert Portfolio.__table__.c.cash_balance.type.scale == 2


class TestTransactionModel:

    def test_table_name(self):
        assert Transaction.__tablename__ == "transactions"

    def test_type_values(self):
        assert [t.value for t in TransactionType] == ["buy", "sell"]

    def test_fractional_shares(self):
        assert Transaction.__table__.c.shares.type.scale == 8

    def test_history_indexes(self):
        names = {index.name for index in Transaction.__table__.indexes}
        assert {"ix_transactions_user_date", "ix_transactions_user_symbol"} <= names


class TestWatchlistItemModel:

    def test_symbol_unique_per_user(self):
        constraints = {c.name for c in WatchlistItem.__table__.constraints}
        assert "uq_watchlist_items_user_symbol" in constraints


class TestTimestamps:

    def test_utc_now_is_aware(self):
        assert utc_now().tzinfo is timezone.utc

    def test_columns_store_timezone(self):
        for column in (
            User.__table__.c.created_at,
            Portfolio.__table__.c.created_at,
            Portfolio.__table__.c.updated_at,
            Transaction.__table__.c.date,
            WatchlistItem.__table__.c.added_at,
        ):
            assert column.type.timezone is True
            assert column.default.is_callable
