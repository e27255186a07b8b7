"""
Simulated month demo: buy-and-hold through 21 trading days.

Demonstrates: config → market and portfolio on a simulated clock → engine
run → ledger report with drawdown metrics.
"""

from datetime import date

from simulation import SimulatedClock, SimulationEngine, print_performance, print_valuation
from stocksim.config import SimulationConfig, build_market, build_portfolio
from stocksim.examples.buy_and_hold import BuyAndHoldStrategy


def main() -> None:
    config = SimulationConfig(seed=2024)
    clock = SimulatedClock(date(2024, 1, 2))
    market = build_market(config)
    portfolio = build_portfolio(config, today=clock.today)

    engine = SimulationEngine(
        market,
        portfolio,
        clock,
        strategy=BuyAndHoldStrategy(symbol="MSFT", quantity=20),
    )
    result = engine.run(21)

    for trade in result.trades:
        print(f"{trade.message} @ ${trade.price:.2f}")
    print_valuation(result.days[-1].valuation)
    print()
    print_performance(portfolio.performance_report(), with_metrics=True)


if __name__ == "__main__":
    main()
