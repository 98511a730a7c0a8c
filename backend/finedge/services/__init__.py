"""
Services Module
"""
from finedge.services.synthetic_data import (
    HISTORY_PERIOD_DAYS,
    TIMEFRAME_DAYS,
    SyntheticDataGenerator,
    history_days,
)

__all__ = [
    "HISTORY_PERIOD_DAYS",
    "TIMEFRAME_DAYS",
    "SyntheticDataGenerator",
    "history_days",
]
