"""
Order: a request to buy or sell whole shares at the current market price.

Immutable. The portfolio never sees an Order directly; the broker resolves the
price and calls Portfolio.buy/sell.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class Order:
    """Market order for a whole number of shares."""

    symbol: str
    side: Side
    quantity: int
