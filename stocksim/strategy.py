"""
Strategy: interface for automated trading in a simulated session.

Strategies look at the market and portfolio once per simulated day and return
orders. The simulation engine submits them through the broker.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from stocksim.market import Market
    from stocksim.order import Order
    from stocksim.portfolio import Portfolio


class Strategy(ABC):
    """
    Base class for strategies. Called once per simulated day after prices move.
    Portfolio is read-only context; trades go through returned orders.
    """

    @abstractmethod
    def on_day(
        self,
        day: "date",
        market: "Market",
        portfolio: "Portfolio",
    ) -> list["Order"]:
        """Return zero or more orders for this day."""
        ...
