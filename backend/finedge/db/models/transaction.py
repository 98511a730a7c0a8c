"""
FinEdge - Transaction Model

Ledger entries. Rows are only ever inserted.
"""
import enum

from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, Index, Enum as SQLEnum
from sqlalchemy.orm import relationship

from finedge.db.database import Base, utc_now


class TransactionType(str, enum.Enum):
    """Transaction side."""
    BUY = "buy"
    SELL = "sell"


class Transaction(Base):
    """Executed buy or sell."""

    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_user_date", "user_id", "date"),
        Index("ix_transactions_user_symbol", "user_id", "symbol"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    type = Column(
        SQLEnum(TransactionType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    symbol = Column(String(20), nullable=False)
    name = Column(String(255), nullable=False)

    shares = Column(Numeric(16, 8), nullable=False)
    price = Column(Numeric(16, 2), nullable=False)  # Execution price
    total = Column(Numeric(16, 2), nullable=False)  # shares * price

    date = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    # Relationships
    user = relationship("User", back_populates="transactions")

    def __repr__(self):
        return f"<Transaction {self.type.value} {self.symbol} qty={self.shares} @ {self.price}>"
