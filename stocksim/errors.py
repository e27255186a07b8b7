"""
Exceptions raised by the simulation core.

Trade problems (bad quantity, not enough cash or shares) are not exceptions;
they come back as a rejected TradeOutcome. These are for lookups, reports and
object construction.
"""


class StockSimError(Exception):
    """Base exception for stocksim."""


class ConstructionError(StockSimError, ValueError):
    """Invalid symbol, price or balance when creating a core object."""


class SymbolNotFoundError(StockSimError, KeyError):
    """Symbol is absent from the market (or holdings) where a lookup needs it."""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"Unknown symbol: {self.symbol}"


class EmptyHistoryError(StockSimError):
    """Performance report requested before any valuation snapshot exists."""
