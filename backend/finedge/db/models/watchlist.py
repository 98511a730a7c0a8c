"""
FinEdge - Watchlist Model
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from finedge.db.database import Base, utc_now


class WatchlistItem(Base):
    """Symbol followed by a user. Price data is resolved on read."""

    __tablename__ = "watchlist_items"
    __table_args__ = (
        UniqueConstraint("user_id", "symbol", name="uq_watchlist_items_user_symbol"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    symbol = Column(String(20), nullable=False)
    name = Column(String(255), nullable=False)  # Cached at add time

    added_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    # Relationships
    user = relationship("User", back_populates="watchlist_items")

    def __repr__(self):
        return f"<WatchlistItem user={self.user_id} {self.symbol}>"
