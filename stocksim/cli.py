"""
Console harness: menu loop over a Market, Portfolio and PaperBroker.

All parsing, prompting and text output lives here; the core only returns
values and outcomes. Input and output streams are injectable so sessions can
be scripted.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from stocksim.config import SimulationConfig, build_market, build_portfolio
from stocksim.errors import EmptyHistoryError, StockSimError
from stocksim.execution import PaperBroker
from stocksim.market import Market
from stocksim.portfolio import Portfolio
from simulation.report import print_market, print_performance, print_valuation

logger = logging.getLogger(__name__)

MENU = """
--- Stock Trading Platform ---
1. View Market Data
2. Buy Stock
3. Sell Stock
4. View Portfolio
5. View Performance
6. Exit"""

EXIT_CHOICE = 6


class TradingConsole:
    """Interactive session. run() returns when the user exits or input ends."""

    def __init__(
        self,
        market: Market,
        portfolio: Portfolio,
        *,
        broker: PaperBroker | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.market = market
        self.portfolio = portfolio
        self.broker = broker if broker is not None else PaperBroker(market, portfolio)
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _ask_positive_int(self, prompt: str) -> int:
        """Prompt until the user enters a positive whole number."""
        raw = self._ask(prompt)
        while True:
            try:
                value = int(raw)
            except ValueError:
                raw = self._ask("Invalid input. Please enter a number: ")
                continue
            if value > 0:
                return value
            raw = self._ask("Please enter a positive number: ")

    def run(self) -> None:
        try:
            while True:
                self._say(MENU)
                raw = self._ask("Choose an option: ")
                try:
                    choice = int(raw)
                except ValueError:
                    self._say("Invalid input. Please enter a number.")
                    continue
                if choice == EXIT_CHOICE:
                    self._say("Exiting...")
                    return
                self.dispatch(choice)
        except EOFError:
            self._say()
            self._say("Exiting...")

    def dispatch(self, choice: int) -> None:
        handlers = {
            1: self.view_market,
            2: self.buy,
            3: self.sell,
            4: self.view_portfolio,
            5: self.view_performance,
        }
        handler = handlers.get(choice)
        if handler is None:
            self._say("Invalid option. Please try again.")
            return
        handler()

    def view_market(self) -> None:
        self.market.refresh_prices()
        print_market(self.market, self._out)

    def buy(self) -> None:
        symbol = self._ask("Enter stock symbol to buy: ").upper()
        if symbol not in self.market:
            self._say("Invalid stock symbol.")
            return
        quantity = self._ask_positive_int("Enter quantity to buy: ")
        self._say(self.broker.buy(symbol, quantity).message or "")

    def sell(self) -> None:
        symbol = self._ask("Enter stock symbol to sell: ").upper()
        if self.portfolio.holding(symbol) == 0:
            self._say(f"You do not own any shares of {symbol}")
            return
        quantity = self._ask_positive_int("Enter quantity to sell: ")
        self._say(self.broker.sell(symbol, quantity).message or "")

    def view_portfolio(self) -> None:
        print_valuation(self.portfolio.valuation(self.market), self._out)

    def view_performance(self) -> None:
        try:
            report = self.portfolio.performance_report()
        except EmptyHistoryError:
            self._say("Performance History:")
            self._say("No performance history available.")
            return
        print_performance(report, self._out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stocksim", description="Console stock trading simulator")
    parser.add_argument("--balance", type=float, default=None, help="Starting cash (default: 10000)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for price moves")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = SimulationConfig.from_env()
        if args.balance is not None:
            config.initial_balance = args.balance
        if args.seed is not None:
            config.seed = args.seed
        market = build_market(config)
        portfolio = build_portfolio(config)
    except StockSimError as e:
        logger.error("Setup failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.info("Session started: balance=%.2f, symbols=%s", portfolio.balance, list(market))
    TradingConsole(market, portfolio, stdin=stdin, stdout=stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
