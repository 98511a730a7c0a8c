"""
FinEdge - Trade Executor

Validates and settles buy/sell orders. Each trade is one database
transaction: the portfolio row is locked, the ledger entry appended and the
cash balance changed by a guarded UPDATE. Any failure rolls everything back,
so a rejected trade leaves neither a ledger row nor a balance change behind.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_CEILING, ROUND_FLOOR
from typing import Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from finedge.core.portfolio.valuation import CENT, ZERO, owned_shares
from finedge.core.trading.orders import OrderType
from finedge.data_providers.base import Quote, QuoteProvider
from finedge.db.models.portfolio import Portfolio
from finedge.db.models.transaction import Transaction, TransactionType
from finedge.db.repositories.portfolio import PortfolioRepository
from finedge.db.repositories.transaction import TransactionRepository
from finedge.utils.exceptions import (
    InsufficientFundsError,
    InsufficientSharesError,
    InvalidArgumentError,
    PortfolioNotFoundError,
    StockNotFoundError,
)


# Ledger stores shares with 8 decimal places
SHARE_STEP = Decimal("0.00000001")
MAX_SHARES = Decimal("100000000")


@dataclass
class TradeResult:
    """Executed trade."""
    message: str
    transaction: Transaction


def normalize_shares(shares) -> Decimal:
    """
    Validate a requested share quantity.

    Raises:
        InvalidArgumentError: If not a positive number with at most 8 decimals
    """
    try:
        value = Decimal(str(shares))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidArgumentError("Shares must be a number")

    if not value.is_finite() or value <= 0:
        raise InvalidArgumentError("Shares must be greater than zero")
    if value >= MAX_SHARES:
        raise InvalidArgumentError("Too many shares")
    if value != value.quantize(SHARE_STEP):
        raise InvalidArgumentError("Shares support at most 8 decimal places")
    return value


def normalize_symbol(symbol: Optional[str]) -> str:
    """Trim and upper-case a ticker. Raises InvalidArgumentError if blank."""
    value = (symbol or "").strip().upper()
    if not value:
        raise InvalidArgumentError("Symbol is required")
    return value


def settlement_amount(quantity: Decimal, price: Decimal, side: TransactionType) -> Decimal:
    """
    Cash moved by a trade, in cents.

    Buys round up and sells round down; rounding never adds cash.

    Raises:
        InvalidArgumentError: If the order is worth less than one cent
    """
    rounding = ROUND_CEILING if side == TransactionType.BUY else ROUND_FLOOR
    amount = (quantity * price).quantize(CENT, rounding=rounding)
    if amount <= ZERO:
        raise InvalidArgumentError("Order value must be at least 0.01")
    return amount


class TradeExecutor:
    """
    Trade Executor

    Responsible for:
    - Input validation
    - Cash and share ownership checks
    - Appending ledger entries
    - Cash balance settlement
    """

    def __init__(self, db: AsyncSession, quotes: QuoteProvider):
        self.db = db
        self.quotes = quotes
        self.portfolios = PortfolioRepository(db)
        self.ledger = TransactionRepository(db)

    async def _lock_portfolio(self, user_id: int) -> Portfolio:
        portfolio = await self.portfolios.get_by_user(user_id, for_update=True)
        if portfolio is None:
            raise PortfolioNotFoundError()
        return portfolio

    def _quote(self, symbol: str) -> Quote:
        quote = self.quotes.lookup(symbol)
        if quote is None:
            raise StockNotFoundError(symbol)
        return quote

    async def buy(
        self,
        user_id: int,
        symbol: str,
        shares,
        order_type: OrderType = OrderType.MARKET,
        limit_price: Optional[Decimal] = None,
    ) -> TradeResult:
        """
        Buy shares at the current quote price.

        Args:
            user_id: Buyer
            symbol: Stock symbol (case-insensitive)
            shares: Quantity, positive
            order_type: Declared order type (does not change the fill)
            limit_price: Declared limit price (does not change the fill)

        Returns:
            TradeResult with the new ledger entry

        Raises:
            InvalidArgumentError: Bad quantity or order worth under a cent
            PortfolioNotFoundError: User has no portfolio
            StockNotFoundError: Unknown symbol
            InsufficientFundsError: Cost exceeds cash balance
        """
        quantity = normalize_shares(shares)
        symbol = normalize_symbol(symbol)

        try:
            portfolio = await self._lock_portfolio(user_id)
            quote = self._quote(symbol)

            cost = settlement_amount(quantity, quote.price, TransactionType.BUY)
            if cost > portfolio.cash_balance:
                raise InsufficientFundsError()

            entry = await self.ledger.append(
                user_id=user_id,
                type=TransactionType.BUY,
                symbol=quote.symbol,
                name=quote.name,
                shares=quantity,
                price=quote.price,
                total=cost,
            )

            if not await self.portfolios.debit(portfolio.id, cost):
                # Balance changed since it was read
                raise InsufficientFundsError()

            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.warning(f"Buy rejected for user {user_id}: {quantity} {symbol} - {e}")
            raise

        logger.info(
            f"BUY executed: user={user_id} {quantity} {quote.symbol} @ {quote.price} "
            f"total={cost} order_type={order_type.value} limit={limit_price}"
        )
        return TradeResult(message="Purchase successful", transaction=entry)

    async def sell(
        self,
        user_id: int,
        symbol: str,
        shares,
        order_type: OrderType = OrderType.MARKET,
        limit_price: Optional[Decimal] = None,
    ) -> TradeResult:
        """
        Sell owned shares at the current quote price.

        Raises:
            InvalidArgumentError: Bad quantity or order worth under a cent
            PortfolioNotFoundError: User has no portfolio
            InsufficientSharesError: Fewer shares owned than requested
            StockNotFoundError: Unknown symbol
        """
        quantity = normalize_shares(shares)
        symbol = normalize_symbol(symbol)

        try:
            portfolio = await self._lock_portfolio(user_id)

            history = await self.ledger.list_by_user(user_id, symbol=symbol)
            if owned_shares(history) < quantity:
                raise InsufficientSharesError()

            quote = self._quote(symbol)
            proceeds = settlement_amount(quantity, quote.price, TransactionType.SELL)

            entry = await self.ledger.append(
                user_id=user_id,
                type=TransactionType.SELL,
                symbol=quote.symbol,
                name=quote.name,
                shares=quantity,
                price=quote.price,
                total=proceeds,
            )
            await self.portfolios.credit(portfolio.id, proceeds)

            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.warning(f"Sell rejected for user {user_id}: {quantity} {symbol} - {e}")
            raise

        logger.info(
            f"SELL executed: user={user_id} {quantity} {quote.symbol} @ {quote.price} "
            f"total={proceeds} order_type={order_type.value} limit={limit_price}"
        )
        return TradeResult(message="Sale successful", transaction=entry)
