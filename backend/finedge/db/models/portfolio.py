"""
FinEdge - Portfolio Model
"""
from decimal import Decimal

from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from finedge.db.database import Base, utc_now


class Portfolio(Base):
    """
    Cash account of a user.

    Holdings are not stored here; they are derived from the user's
    transactions on every read.
    """

    __tablename__ = "portfolios"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)

    cash_balance = Column(Numeric(16, 2), nullable=False, default=Decimal("10000.00"))

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    user = relationship("User", back_populates="portfolio")

    def __repr__(self):
        return f"<Portfolio user={self.user_id} cash={self.cash_balance}>"
