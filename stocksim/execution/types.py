"""
Execution-layer types: trade outcome and rejection reasons.

Every trade returns a TradeOutcome; nothing in the trade path raises for bad
user input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stocksim.order import Side


class OutcomeKind(Enum):
    """Whether a trade executed."""

    FILLED = "filled"
    REJECTED = "rejected"


class RejectReason(Enum):
    """Why a trade was rejected."""

    INVALID_QUANTITY = "invalid_quantity"
    INVALID_PRICE = "invalid_price"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    INSUFFICIENT_SHARES = "insufficient_shares"
    SYMBOL_NOT_FOUND = "symbol_not_found"


@dataclass(frozen=True)
class TradeOutcome:
    """Result of a buy or sell. Immutable."""

    kind: OutcomeKind
    side: Side
    symbol: str
    quantity: int
    price: float | None = None
    balance: float | None = None
    reason: RejectReason | None = None
    message: str | None = None

    @property
    def filled(self) -> bool:
        return self.kind == OutcomeKind.FILLED

    @property
    def amount(self) -> float:
        """Cash moved by the trade; 0 when rejected."""
        if not self.filled or self.price is None:
            return 0.0
        return self.quantity * self.price

    @classmethod
    def fill(cls, side: Side, symbol: str, quantity: int, price: float, balance: float) -> TradeOutcome:
        verb = "Bought" if side == Side.BUY else "Sold"
        return cls(
            kind=OutcomeKind.FILLED,
            side=side,
            symbol=symbol,
            quantity=quantity,
            price=price,
            balance=balance,
            message=f"{verb} {quantity} shares of {symbol}",
        )

    @classmethod
    def reject(
        cls,
        side: Side,
        symbol: str,
        quantity: int,
        reason: RejectReason,
        message: str,
        *,
        price: float | None = None,
    ) -> TradeOutcome:
        return cls(
            kind=OutcomeKind.REJECTED,
            side=side,
            symbol=symbol,
            quantity=quantity,
            price=price,
            reason=reason,
            message=message,
        )
