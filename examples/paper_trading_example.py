"""
Paper trading example: drive the broker directly, without the console menu.

Shows: refresh → buy at the live quote → valuation → rejected orders and the
order log.
"""

from __future__ import annotations

from stocksim.config import SimulationConfig, build_market, build_portfolio
from stocksim.execution import PaperBroker
from simulation import print_market, print_valuation


def main() -> None:
    config = SimulationConfig(seed=7)
    market = build_market(config)
    portfolio = build_portfolio(config)
    broker = PaperBroker(market, portfolio)

    market.refresh_prices()
    print_market(market)

    print("\n--- Orders ---")
    for outcome in (
        broker.buy("MSFT", 10),
        broker.buy("WIPRO", 100),   # more than the cash balance
        broker.sell("TATA STEEL", 1),  # not held
        broker.buy("AAPL", 1),  # not listed
    ):
        print(f"  {outcome.kind.value}: {outcome.message}")

    print()
    print_valuation(portfolio.valuation(market))

    print("\n--- Order log ---")
    for order, outcome in broker.get_order_log():
        reason = outcome.reason.value if outcome.reason else "-"
        print(f"  {order.side.value} {order.quantity} {order.symbol} -> {outcome.kind.value} ({reason})")


if __name__ == "__main__":
    main()
