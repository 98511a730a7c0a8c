"""
FinEdge - Order Types
"""
from enum import Enum


class OrderType(str, Enum):
    """
    Declared order type.

    Kept in the API for forward compatibility. There is no order book:
    market and limit orders both fill immediately at the live quote price.
    """
    MARKET = "market"
    LIMIT = "limit"
