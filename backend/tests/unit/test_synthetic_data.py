"""
Unit Tests - Synthetic Display Data
"""
from datetime import datetime
from decimal import Decimal

from finedge.services.synthetic_data import (
    SECTORS,
    TIMEFRAME_DAYS,
    SyntheticDataGenerator,
    format_point_date,
    history_days,
)


class TestFormatPointDate:

    def test_intraday_uses_time(self):
        assert format_point_date(datetime(2024, 6, 15, 9, 5), 1) == "09:05"

    def test_short_span_uses_day(self):
        assert format_point_date(datetime(2024, 6, 5), 30) == "Jun 5"

    def test_long_span_uses_month(self):
        assert format_point_date(datetime(2024, 6, 5), 365) == "Jun 2024"


class TestHistoryDays:

    def test_known_periods(self):
        assert history_days("1d") == 1
        assert history_days("5D") == 5
        assert history_days("6m") == 180
        assert history_days("5y") == 1825

    def test_unknown_period_is_one_year(self):
        assert history_days("forever") == 365
        assert history_days("") == 365


class TestSyntheticDataGenerator:

    def test_seed_is_reproducible(self):
        clock = lambda: datetime(2024, 6, 15)
        first = SyntheticDataGenerator(seed=7, clock=clock).performance_series(Decimal("1000"), 30)
        second = SyntheticDataGenerator(seed=7, clock=clock).performance_series(Decimal("1000"), 30)
        assert first == second

    def test_series_length(self, synthetic):
        assert len(synthetic.performance_series(Decimal("1000"), 30)) == 31

    def test_performance_data_has_every_timeframe(self, synthetic):
        data = synthetic.performance_data(Decimal("10000"))
        assert set(data) == set(TIMEFRAME_DAYS)
        assert len(data["1W"]) == 8

    def test_performance_never_negative(self, synthetic):
        assert all(p["value"] >= 0 for p in synthetic.performance_series(Decimal("0"), 90))

    def test_price_history_floor(self, synthetic):
        points = synthetic.price_history(Decimal("0.02"), "5y")
        assert len(points) == 1826
        assert all(p["value"] >= 0.01 for p in points)

    def test_daily_change_is_one_percent(self, synthetic):
        change, percent = synthetic.daily_change(Decimal("10000.00"))
        assert abs(change) == Decimal("100.00")
        assert abs(percent) == Decimal("1.00")

    def test_daily_change_of_empty_portfolio(self, synthetic):
        change, percent = synthetic.daily_change(Decimal("0"))
        assert change == 0
        assert percent == Decimal("0")

    def test_sector_allocation_sums_to_100(self, synthetic):
        for _ in range(20):
            allocation = synthetic.sector_allocation()
            assert sum(a["percentage"] for a in allocation) == 100
            assert all(a["percentage"] > 0 for a in allocation)
            assert {a["sector"] for a in allocation} <= set(SECTORS)
