"""
MarketQuote: current tradable price for one symbol.

The symbol is fixed at creation; the price moves in place when the market
refreshes. Price is strictly positive at all times.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from stocksim.errors import ConstructionError


def _check_price(price: float) -> float:
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ConstructionError(f"Stock price must be a number, got {price!r}")
    if not math.isfinite(price) or price <= 0:
        raise ConstructionError(f"Stock price must be positive, got {price!r}")
    return float(price)


@dataclass
class MarketQuote:
    """A tradable symbol and its latest price. Mutable price, immutable symbol."""

    symbol: str
    price: float

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, str) or not self.symbol.strip():
            raise ConstructionError("Stock symbol cannot be empty.")

    def __setattr__(self, name: str, value: object) -> None:
        if name == "symbol" and "symbol" in self.__dict__:
            raise AttributeError("MarketQuote.symbol is immutable")
        if name == "price":
            value = _check_price(value)  # type: ignore[arg-type]
        object.__setattr__(self, name, value)

    def scale(self, factor: float) -> float:
        """Multiply price by factor (must be > 0). Returns the new price."""
        if not factor > 0:
            raise ValueError(f"Price factor must be positive, got {factor!r}")
        self.price = self.price * factor
        return self.price
