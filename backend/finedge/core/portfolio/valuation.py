"""
FinEdge - Portfolio Valuation Engine

Derives holdings and portfolio totals from the transaction ledger and a quote
provider. Everything here is a pure function of its inputs: nothing is cached
and nothing is written back.

Cost basis rule ("average cost retained on sell"):
    shares     = sum(buy shares) - sum(sell shares)
    cost_basis = sum(buy price * buy shares)
A sell reduces the share count only; the cost basis keeps every purchase ever
made for the symbol. Symbols with shares <= 0 after the fold are not holdings.
"""
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Protocol

from finedge.data_providers.base import QuoteProvider
from finedge.db.models.transaction import TransactionType


ZERO = Decimal("0")
CENT = Decimal("0.01")
PRICE_STEP = Decimal("0.0001")
HUNDRED = Decimal("100")


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def percent_of(part: Decimal, whole: Decimal) -> Decimal:
    """part / whole * 100 rounded to 2 dp, or 0 when whole is not positive."""
    if whole <= 0:
        return ZERO.quantize(CENT)
    return (part / whole * HUNDRED).quantize(CENT, rounding=ROUND_HALF_UP)


class LedgerEntry(Protocol):
    """Fields of a transaction the engine reads."""
    type: TransactionType
    symbol: str
    name: str
    shares: Decimal
    price: Decimal


@dataclass
class Position:
    """Running fold of one symbol's transactions."""
    symbol: str
    name: str
    shares: Decimal = ZERO
    cost_basis: Decimal = ZERO

    def apply(self, entry: LedgerEntry) -> None:
        """Apply one transaction under the retained-cost-basis rule."""
        shares = Decimal(entry.shares)
        if entry.type == TransactionType.BUY:
            self.shares += shares
            self.cost_basis += Decimal(entry.price) * shares
        else:
            self.shares -= shares


def accumulate_positions(entries: Iterable[LedgerEntry]) -> dict[str, Position]:
    """
    Fold transactions into symbol -> Position.

    Symbols keep the order of their first transaction. Closed and negative
    positions are included; callers filter.
    """
    positions: dict[str, Position] = {}
    for entry in entries:
        position = positions.get(entry.symbol)
        if position is None:
            position = Position(symbol=entry.symbol, name=entry.name)
            positions[entry.symbol] = position
        position.apply(entry)
    return positions


def owned_shares(entries: Iterable[LedgerEntry], symbol: Optional[str] = None) -> Decimal:
    """Net shares (buys - sells), optionally restricted to one symbol."""
    total = ZERO
    for entry in entries:
        if symbol is not None and entry.symbol.upper() != symbol.upper():
            continue
        shares = Decimal(entry.shares)
        total += shares if entry.type == TransactionType.BUY else -shares
    return total


@dataclass(frozen=True)
class Holding:
    """Valued net position in one symbol."""
    symbol: str
    name: str
    shares: Decimal
    cost_basis: Decimal
    current_price: Decimal
    market_value: Decimal
    avg_cost: Decimal
    gain_loss: Decimal
    gain_loss_percent: Decimal


@dataclass(frozen=True)
class PortfolioValuation:
    """Deterministic financial view of a portfolio."""
    cash_balance: Decimal
    initial_deposit: Decimal
    holdings: list[Holding] = field(default_factory=list)
    total_value: Decimal = ZERO
    total_return: Decimal = ZERO
    total_return_percent: Decimal = ZERO

    @property
    def holdings_value(self) -> Decimal:
        return sum((h.market_value for h in self.holdings), ZERO)


def value_position(position: Position, quotes: QuoteProvider) -> Holding:
    """
    Price a position with a positive share count.

    A symbol without a quote is valued at 0 rather than failing.
    """
    quote = quotes.lookup(position.symbol)
    current_price = quote.price if quote is not None else ZERO

    cost_basis = to_cents(position.cost_basis)
    market_value = to_cents(position.shares * current_price)
    gain_loss = market_value - cost_basis

    return Holding(
        symbol=position.symbol,
        name=position.name,
        shares=position.shares,
        cost_basis=cost_basis,
        current_price=current_price,
        market_value=market_value,
        avg_cost=(position.cost_basis / position.shares).quantize(PRICE_STEP, rounding=ROUND_HALF_UP),
        gain_loss=gain_loss,
        gain_loss_percent=percent_of(gain_loss, cost_basis),
    )


def value_holdings(entries: Iterable[LedgerEntry], quotes: QuoteProvider) -> list[Holding]:
    """Current holdings; symbols with shares <= 0 are omitted."""
    return [
        value_position(position, quotes)
        for position in accumulate_positions(entries).values()
        if position.shares > 0
    ]


def value_portfolio(
    cash_balance: Decimal,
    entries: Iterable[LedgerEntry],
    quotes: QuoteProvider,
    initial_deposit: Decimal,
) -> PortfolioValuation:
    """
    Value a portfolio from its cash balance and full transaction history.

    Args:
        cash_balance: Current cash of the portfolio
        entries: All of the user's transactions
        quotes: Price source
        initial_deposit: Seed cash the account was opened with

    Returns:
        PortfolioValuation where total_value == cash_balance + sum(market values)
    """
    cash = Decimal(cash_balance)
    holdings = value_holdings(entries, quotes)
    total_value = sum((h.market_value for h in holdings), ZERO) + cash
    total_return = total_value - initial_deposit

    return PortfolioValuation(
        cash_balance=cash,
        initial_deposit=initial_deposit,
        holdings=holdings,
        total_value=total_value,
        total_return=total_return,
        total_return_percent=percent_of(total_return, initial_deposit),
    )
