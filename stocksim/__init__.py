"""
stocksim: single-user stock trading simulation core.

Simulated market quotes, a cash-and-holdings portfolio, and a daily valuation
ledger. No persistence, no network, no real market data.
"""

__version__ = "0.1.0"

from stocksim.errors import ConstructionError, EmptyHistoryError, StockSimError, SymbolNotFoundError
from stocksim.quote import MarketQuote
from stocksim.market import Market
from stocksim.order import Order, Side
from stocksim.portfolio import HoldingValue, PerformanceReport, Portfolio, Valuation
from stocksim.strategy import Strategy

__all__ = [
    "ConstructionError",
    "EmptyHistoryError",
    "HoldingValue",
    "Market",
    "MarketQuote",
    "Order",
    "PerformanceReport",
    "Portfolio",
    "Side",
    "StockSimError",
    "Strategy",
    "SymbolNotFoundError",
    "Valuation",
]
