"""
Buy-and-hold example strategy.

Buys a fixed quantity of one symbol on the first simulated day and then holds.
"""

from datetime import date

from stocksim.market import Market
from stocksim.order import Order, Side
from stocksim.portfolio import Portfolio
from stocksim.strategy import Strategy


class BuyAndHoldStrategy(Strategy):
    """
    On the first day, order quantity shares of symbol.
    Later days return nothing, whether or not the first order filled.
    """

    def __init__(self, symbol: str, quantity: int = 1) -> None:
        self.symbol = symbol
        self.quantity = quantity
        self._fired = False

    def on_day(self, day: date, market: Market, portfolio: Portfolio) -> list[Order]:
        if self._fired:
            return []
        self._fired = True
        return [Order(symbol=self.symbol, side=Side.BUY, quantity=self.quantity)]
