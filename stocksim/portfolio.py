"""
Portfolio: cash balance, share holdings and the daily performance ledger.

Trades validate first and mutate second, so a rejected trade leaves no trace.
Valuation doubles as the ledger writer: each view records one sample for the
current day, and a later view on the same day replaces it.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

import pandas as pd

from stocksim.errors import ConstructionError, EmptyHistoryError
from stocksim.execution.types import RejectReason, TradeOutcome
from stocksim.order import Side

if TYPE_CHECKING:
    from stocksim.market import Market

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HoldingValue:
    """Market value of one holding at valuation time."""

    symbol: str
    quantity: int
    price: float
    value: float


@dataclass(frozen=True)
class Valuation:
    """Cash plus the value of every holding the market can price."""

    as_of: date
    balance: float
    holdings: dict[str, HoldingValue]
    total: float

    @property
    def invested(self) -> float:
        return self.total - self.balance


@dataclass(frozen=True)
class PerformanceReport:
    """
    Date-ordered ledger and overall return.

    overall_return_pct is None when the first recorded value is 0 (undefined).
    """

    entries: list[tuple[date, float]]
    overall_return_pct: float | None

    @property
    def first_value(self) -> float:
        return self.entries[0][1]

    @property
    def last_value(self) -> float:
        return self.entries[-1][1]

    def to_frame(self) -> pd.DataFrame:
        """Ledger as a DataFrame indexed by date with a single 'value' column."""
        df = pd.DataFrame(self.entries, columns=["date", "value"])
        return df.set_index("date")


def _is_whole(quantity: object) -> bool:
    return isinstance(quantity, int) and not isinstance(quantity, bool)


def _is_valid_price(price: object) -> bool:
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False
    return math.isfinite(price) and price > 0


@dataclass
class Portfolio:
    """
    Cash, holdings (symbol -> share count, never zero) and performance history.

    today supplies the ledger date; defaults to the wall clock.
    """

    balance: float = 0.0
    holdings: dict[str, int] = field(default_factory=dict)
    performance_history: dict[date, float] = field(default_factory=dict)
    today: Callable[[], date] = field(default=date.today, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.balance, bool) or not isinstance(self.balance, (int, float)):
            raise ConstructionError(f"Initial balance must be a number, got {self.balance!r}")
        if not math.isfinite(self.balance) or self.balance < 0:
            raise ConstructionError("Initial balance cannot be negative.")
        self.balance = float(self.balance)
        for sym, qty in self.holdings.items():
            if not _is_whole(qty) or qty <= 0:
                raise ConstructionError(f"Holding for {sym} must be a positive integer, got {qty!r}")

    def holding(self, symbol: str) -> int:
        """Shares held in symbol. 0 if not held."""
        return self.holdings.get(symbol, 0)

    def snapshot(self) -> Portfolio:
        """Detached copy for display; changing it does not touch this portfolio."""
        return Portfolio(
            balance=self.balance,
            holdings=dict(self.holdings),
            performance_history=dict(self.performance_history),
            today=self.today,
        )

    def buy(self, symbol: str, quantity: int, unit_price: float) -> TradeOutcome:
        """Buy quantity shares at unit_price. All or nothing."""
        if not _is_whole(quantity) or quantity <= 0:
            return TradeOutcome.reject(
                Side.BUY, symbol, quantity, RejectReason.INVALID_QUANTITY,
                "Quantity must be positive.", price=unit_price,
            )
        if not _is_valid_price(unit_price):
            return TradeOutcome.reject(
                Side.BUY, symbol, quantity, RejectReason.INVALID_PRICE,
                f"Invalid price {unit_price!r} for {symbol}", price=unit_price,
            )
        cost = quantity * unit_price
        if self.balance < cost:
            return TradeOutcome.reject(
                Side.BUY, symbol, quantity, RejectReason.INSUFFICIENT_FUNDS,
                f"Insufficient funds to buy {quantity} shares of {symbol}", price=unit_price,
            )
        self.balance -= cost
        self.holdings[symbol] = self.holding(symbol) + quantity
        logger.info("Bought %d %s @ %.2f; balance %.2f", quantity, symbol, unit_price, self.balance)
        return TradeOutcome.fill(Side.BUY, symbol, quantity, unit_price, self.balance)

    def sell(self, symbol: str, quantity: int, unit_price: float) -> TradeOutcome:
        """Sell quantity shares at unit_price. Drops the holding when it reaches zero."""
        if not _is_whole(quantity) or quantity <= 0:
            return TradeOutcome.reject(
                Side.SELL, symbol, quantity, RejectReason.INVALID_QUANTITY,
                "Quantity must be positive.", price=unit_price,
            )
        held = self.holding(symbol)
        if held < quantity:
            return TradeOutcome.reject(
                Side.SELL, symbol, quantity, RejectReason.INSUFFICIENT_SHARES,
                f"Insufficient shares to sell {quantity} shares of {symbol}", price=unit_price,
            )
        if not _is_valid_price(unit_price):
            return TradeOutcome.reject(
                Side.SELL, symbol, quantity, RejectReason.INVALID_PRICE,
                f"Invalid price {unit_price!r} for {symbol}", price=unit_price,
            )
        proceeds = quantity * unit_price
        if not math.isfinite(proceeds):
            return TradeOutcome.reject(
                Side.SELL, symbol, quantity, RejectReason.INVALID_PRICE,
                f"Invalid price {unit_price!r} for {symbol}", price=unit_price,
            )
        self.balance += proceeds
        remaining = held - quantity
        if remaining == 0:
            del self.holdings[symbol]
        else:
            self.holdings[symbol] = remaining
        logger.info("Sold %d %s @ %.2f; balance %.2f", quantity, symbol, unit_price, self.balance)
        return TradeOutcome.fill(Side.SELL, symbol, quantity, unit_price, self.balance)

    def valuation(self, market: Market) -> Valuation:
        """
        Value cash plus holdings at current market prices and record today's sample.

        Holdings the market cannot price are left out and contribute nothing.
        """
        values: dict[str, HoldingValue] = {}
        total = self.balance
        for sym, qty in self.holdings.items():
            q = market.get(sym)
            if q is None:
                logger.debug("No market quote for held symbol %s; skipped in valuation", sym)
                continue
            value = qty * q.price
            values[sym] = HoldingValue(symbol=sym, quantity=qty, price=q.price, value=value)
            total += value
        day = self.today()
        self.record_value(day, total)
        return Valuation(as_of=day, balance=self.balance, holdings=values, total=total)

    def record_value(self, day: date, total: float) -> None:
        """Set the ledger value for day, replacing any earlier sample that day."""
        self.performance_history[day] = total
        logger.debug("Ledger %s = %.2f", day.isoformat(), total)

    def performance_report(self) -> PerformanceReport:
        """Ledger sorted by date, with return from the earliest to the latest sample."""
        if not self.performance_history:
            raise EmptyHistoryError("No performance history available.")
        entries = sorted(self.performance_history.items())
        first, last = entries[0][1], entries[-1][1]
        pct = None if first == 0 else (last - first) / first * 100.0
        return PerformanceReport(entries=entries, overall_return_pct=pct)
