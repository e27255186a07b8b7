"""
Market: the simulated set of tradable quotes.

Populated once at startup and never resized. refresh_prices() applies a random
multiplicative move to every quote, drawn from an injected random source so
runs can be reproduced.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol

import numpy as np
import pandas as pd

from stocksim.errors import ConstructionError, SymbolNotFoundError
from stocksim.quote import MarketQuote

logger = logging.getLogger(__name__)

DEFAULT_PRICE_BAND = (0.95, 1.05)


class RandomSource(Protocol):
    """Anything with numpy Generator's uniform(low, high) signature."""

    def uniform(self, low: float, high: float) -> float:
        ...


class Market:
    """
    Symbol -> MarketQuote mapping with randomized refresh and lookup.

    rng defaults to a fresh numpy Generator; pass np.random.default_rng(seed)
    (or a stub) for deterministic moves.
    """

    def __init__(
        self,
        quotes: Iterable[MarketQuote],
        *,
        rng: RandomSource | None = None,
        price_band: tuple[float, float] = DEFAULT_PRICE_BAND,
    ) -> None:
        low, high = price_band
        if not 0 < low <= high:
            raise ConstructionError(f"Invalid price band {price_band!r}")
        self._quotes: dict[str, MarketQuote] = {}
        for q in quotes:
            if q.symbol in self._quotes:
                raise ConstructionError(f"Duplicate symbol in market: {q.symbol}")
            self._quotes[q.symbol] = q
        self._rng: RandomSource = rng if rng is not None else np.random.default_rng()
        self.price_band = (float(low), float(high))

    @classmethod
    def from_prices(
        cls,
        prices: Mapping[str, float],
        *,
        rng: RandomSource | None = None,
        price_band: tuple[float, float] = DEFAULT_PRICE_BAND,
    ) -> Market:
        """Build a market from a symbol -> starting price mapping."""
        return cls(
            (MarketQuote(symbol=s, price=p) for s, p in prices.items()),
            rng=rng,
            price_band=price_band,
        )

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._quotes

    def __iter__(self) -> Iterator[str]:
        return iter(self._quotes)

    def __len__(self) -> int:
        return len(self._quotes)

    def quotes(self) -> list[MarketQuote]:
        """All quotes in insertion order."""
        return list(self._quotes.values())

    def quote(self, symbol: str) -> MarketQuote:
        """Quote for symbol. Raises SymbolNotFoundError if not listed."""
        try:
            return self._quotes[symbol]
        except KeyError:
            raise SymbolNotFoundError(symbol) from None

    def get(self, symbol: str) -> MarketQuote | None:
        """Quote for symbol, or None if not listed."""
        return self._quotes.get(symbol)

    def refresh_prices(self) -> None:
        """Move every price by a factor drawn uniformly from [low, high)."""
        low, high = self.price_band
        for q in self._quotes.values():
            old = q.price
            q.scale(float(self._rng.uniform(low, high)))
            logger.debug("Refreshed %s: %.4f -> %.4f", q.symbol, old, q.price)

    def prices(self) -> dict[str, float]:
        """Current symbol -> price."""
        return {s: q.price for s, q in self._quotes.items()}

    def to_frame(self) -> pd.DataFrame:
        """One row per symbol with columns symbol, price."""
        rows = [{"symbol": s, "price": q.price} for s, q in self._quotes.items()]
        return pd.DataFrame(rows) if rows else pd.DataFrame(columns=["symbol", "price"])
