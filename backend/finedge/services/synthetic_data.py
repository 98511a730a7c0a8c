"""
Synthetic Display Data

Illustrative, randomized chart data for the UI: portfolio performance series,
daily change, sector allocation and per-stock price history.

Nothing produced here is a financial fact. Values change on every call unless
a seed is supplied, and they must never be used to compute cash balances,
holdings or portfolio totals.
"""
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

import numpy as np


# Portfolio chart timeframes and their length in days
TIMEFRAME_DAYS: dict[str, int] = {
    "1D": 1,
    "1W": 7,
    "1M": 30,
    "3M": 90,
    "1Y": 365,
    "ALL": 1095,  # ~3 years
}

# Stock history periods and their length in days
HISTORY_PERIOD_DAYS: dict[str, int] = {
    "1d": 1,
    "5d": 5,
    "1m": 30,
    "3m": 90,
    "6m": 180,
    "1y": 365,
    "5y": 1825,
}
DEFAULT_HISTORY_DAYS = 365

SECTORS = ("Technology", "Finance", "Healthcare", "Consumer Goods", "Energy")

# Series start at this fraction of the current value
START_FRACTION = 0.7


def format_point_date(moment: datetime, span_days: int) -> str:
    """Label granularity follows the chart span: time, day or month."""
    if span_days <= 1:
        return moment.strftime("%H:%M")
    if span_days <= 30:
        return f"{moment:%b} {moment.day}"
    return moment.strftime("%b %Y")


def history_days(period: str) -> int:
    """Days covered by a stock history period; unknown periods mean one year."""
    return HISTORY_PERIOD_DAYS.get((period or "").lower(), DEFAULT_HISTORY_DAYS)


class SyntheticDataGenerator:
    """
    Random-walk generator for display-only chart data.

    Args:
        seed: Optional seed for reproducible output (tests)
        clock: Callable returning "now"; series end at this moment
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._rng = np.random.default_rng(seed)
        self._clock = clock

    def _walk(
        self,
        current_value: float,
        days: int,
        low: float,
        high: float,
        floor: float,
    ) -> list[dict]:
        now = self._clock()
        value = current_value * START_FRACTION
        points = []
        for offset in range(days, -1, -1):
            value += float(self._rng.uniform(low, high)) * value
            value = max(value, floor)
            points.append({
                "date": format_point_date(now - timedelta(days=offset), days),
                "value": round(value, 2),
            })
        return points

    def performance_series(self, current_value: Decimal, days: int) -> list[dict]:
        """Portfolio value series drifting upwards towards the current value."""
        return self._walk(float(current_value), days, -0.01, 0.02, 0.0)

    def performance_data(self, current_value: Decimal) -> dict[str, list[dict]]:
        """One series per chart timeframe."""
        return {
            timeframe: self.performance_series(current_value, days)
            for timeframe, days in TIMEFRAME_DAYS.items()
        }

    def daily_change(self, total_value: Decimal) -> tuple[Decimal, Decimal]:
        """
        Fake intraday move of +/-1% of the total value.

        Returns:
            Tuple of (change, change percent)
        """
        direction = 1 if self._rng.random() > 0.5 else -1
        change = (total_value * Decimal("0.01") * direction).quantize(Decimal("0.01"))
        if total_value == 0:
            return change, Decimal("0")
        percent = (change / total_value * 100).quantize(Decimal("0.01"))
        return change, percent

    def sector_allocation(self) -> list[dict]:
        """Random split of 100% across sectors; zero-weight sectors are dropped."""
        remaining = 100
        allocation = []
        for index, sector in enumerate(SECTORS):
            if index == len(SECTORS) - 1:
                percentage = remaining
            else:
                percentage = int(np.floor(self._rng.random() * remaining * 0.7))
                remaining -= percentage
            if percentage > 0:
                allocation.append({"sector": sector, "percentage": percentage})
        return allocation

    def price_history(self, price: Decimal, period: str) -> list[dict]:
        """Daily price random walk ending today; prices never drop below 0.01."""
        return self._walk(float(price), history_days(period), -0.03, 0.03, 0.01)
