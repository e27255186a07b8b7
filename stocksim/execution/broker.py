"""
Paper broker: fills orders at the live market price.

Holds references to one Market and one Portfolio. Price is resolved from the
market when the order is submitted; a symbol the market does not list cannot
be traded, even if it is still held.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stocksim.errors import SymbolNotFoundError
from stocksim.execution.types import RejectReason, TradeOutcome
from stocksim.order import Order, Side

if TYPE_CHECKING:
    from stocksim.market import Market
    from stocksim.portfolio import Portfolio

logger = logging.getLogger(__name__)


class PaperBroker:
    """
    Routes orders from the harness (or a strategy) to the portfolio.
    Keeps a log of every submitted order and its outcome. Rejections are
    logged here; the portfolio logs fills only.
    """

    def __init__(self, market: Market, portfolio: Portfolio) -> None:
        self.market = market
        self.portfolio = portfolio
        self._order_log: list[tuple[Order, TradeOutcome]] = []

    def submit_order(self, order: Order) -> TradeOutcome:
        """Fill order at the current quote, or return the rejection."""
        try:
            price = self.market.quote(order.symbol).price
        except SymbolNotFoundError as e:
            outcome = TradeOutcome.reject(
                order.side, order.symbol, order.quantity,
                RejectReason.SYMBOL_NOT_FOUND, str(e),
            )
        else:
            if order.side == Side.BUY:
                outcome = self.portfolio.buy(order.symbol, order.quantity, price)
            else:
                outcome = self.portfolio.sell(order.symbol, order.quantity, price)
        if not outcome.filled:
            logger.info(
                "Order rejected: %s %s %s (%s)",
                order.side.value, order.quantity, order.symbol,
                outcome.reason.value if outcome.reason else "unknown",
            )
        self._order_log.append((order, outcome))
        return outcome

    def buy(self, symbol: str, quantity: int) -> TradeOutcome:
        return self.submit_order(Order(symbol=symbol, side=Side.BUY, quantity=quantity))

    def sell(self, symbol: str, quantity: int) -> TradeOutcome:
        return self.submit_order(Order(symbol=symbol, side=Side.SELL, quantity=quantity))

    def get_order_log(self) -> list[tuple[Order, TradeOutcome]]:
        """All submitted orders and their outcomes, oldest first."""
        return list(self._order_log)

    def trades(self) -> list[TradeOutcome]:
        """Filled outcomes only, oldest first."""
        return [o for _, o in self._order_log if o.filled]
