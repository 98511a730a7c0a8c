"""
Quote Provider Interface

Read-only market data contract consumed by the valuation engine, the trade
executor and the watchlist. Implementations must be safe to share between
requests without locking.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence


@dataclass(frozen=True)
class Quote:
    """Normalized quote data structure."""
    symbol: str
    name: str
    price: Decimal
    change: Decimal = Decimal("0")
    change_percent: Decimal = Decimal("0")


class QuoteProvider(ABC):
    """
    Abstract quote source.

    `lookup` returning None is a normal outcome and callers decide what a
    missing quote means for them.
    """

    name: str = "base"

    @abstractmethod
    def lookup(self, symbol: str) -> Optional[Quote]:
        """Case-insensitive exact match on symbol."""

    @abstractmethod
    def quotes(self) -> Sequence[Quote]:
        """All tradable stock quotes."""

    @abstractmethod
    def indices(self) -> Sequence[Quote]:
        """Market index levels."""

    def search(self, query: str) -> list[Quote]:
        """Case-insensitive substring match on symbol or company name."""
        needle = query.strip().lower()
        if not needle:
            return []
        return [
            q for q in self.quotes()
            if needle in q.symbol.lower() or needle in q.name.lower()
        ]

    def top_movers(self, limit: int = 10) -> list[Quote]:
        """Quotes ordered by absolute percentage change, largest first."""
        ranked = sorted(self.quotes(), key=lambda q: abs(q.change_percent), reverse=True)
        return ranked[:limit]
