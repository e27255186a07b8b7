"""
Simulation engine: runs a portfolio through consecutive simulated days.

Each day: refresh prices → strategy orders → broker fills → valuation (one
ledger sample per day) → advance the clock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta

from stocksim import Market, Portfolio, Strategy
from stocksim.execution import PaperBroker, TradeOutcome
from stocksim.portfolio import Valuation

logger = logging.getLogger(__name__)


class SimulatedClock:
    """
    Date provider for a simulated session. Pass clock.today to Portfolio so
    valuations are recorded against simulated days rather than the wall clock.
    """

    def __init__(self, start: date) -> None:
        self._current = start

    def today(self) -> date:
        return self._current

    def advance(self, days: int = 1) -> date:
        """Move forward days (>= 0) and return the new date."""
        if days < 0:
            raise ValueError("Cannot move the clock backwards")
        self._current += timedelta(days=days)
        return self._current


@dataclass(frozen=True)
class DayResult:
    """What happened on one simulated day."""

    day: date
    outcomes: list[TradeOutcome]
    valuation: Valuation


@dataclass
class SimulationResult:
    """Result of a run: per-day results, fills, equity curve."""

    days: list[DayResult] = field(default_factory=list)
    trades: list[TradeOutcome] = field(default_factory=list)
    equity_curve: list[tuple[date, float]] = field(default_factory=list)


class SimulationEngine:
    """
    Steps market, strategy and portfolio one day at a time.
    The portfolio's date provider should be clock.today; the engine checks.
    """

    def __init__(
        self,
        market: Market,
        portfolio: Portfolio,
        clock: SimulatedClock,
        *,
        strategy: Strategy | None = None,
        broker: PaperBroker | None = None,
    ) -> None:
        if portfolio.today != clock.today:
            raise ValueError("Portfolio must use the simulation clock as its date provider")
        self.market = market
        self.portfolio = portfolio
        self.clock = clock
        self.strategy = strategy
        self.broker = broker if broker is not None else PaperBroker(market, portfolio)

    def step(self) -> DayResult:
        """Run one simulated day and advance the clock."""
        day = self.clock.today()
        self.market.refresh_prices()

        outcomes: list[TradeOutcome] = []
        if self.strategy is not None:
            for order in self.strategy.on_day(day, self.market, self.portfolio):
                outcomes.append(self.broker.submit_order(order))

        valuation = self.portfolio.valuation(self.market)
        logger.info("Day %s: total value %.2f (%d orders)", day.isoformat(), valuation.total, len(outcomes))
        self.clock.advance()
        return DayResult(day=day, outcomes=outcomes, valuation=valuation)

    def run(self, days: int) -> SimulationResult:
        """Run days consecutive steps."""
        if days < 0:
            raise ValueError("days must be non-negative")
        result = SimulationResult()
        for _ in range(days):
            day_result = self.step()
            result.days.append(day_result)
            result.trades.extend(o for o in day_result.outcomes if o.filled)
            result.equity_curve.append((day_result.day, day_result.valuation.total))
        return result
