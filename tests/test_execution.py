"""
Tests for execution layer: PaperBroker, TradeOutcome, Order.
"""

import logging
from datetime import date

import pytest

from stocksim import Market, Order, Portfolio, Side
from stocksim.execution import OutcomeKind, PaperBroker, RejectReason, TradeOutcome


def _broker(balance: float = 10_000.0, prices: dict[str, float] | None = None) -> PaperBroker:
    market = Market.from_prices(prices or {"MSFT": 300.0, "WIPRO": 3400.0})
    portfolio = Portfolio(balance=balance, today=lambda: date(2024, 1, 2))
    return PaperBroker(market, portfolio)


# --- Order & TradeOutcome ---


def test_order_immutable():
    o = Order(symbol="MSFT", side=Side.BUY, quantity=1)
    with pytest.raises(AttributeError):
        o.quantity = 2


def test_outcome_amount():
    filled = TradeOutcome.fill(Side.SELL, "MSFT", 3, 100.0, 500.0)
    assert filled.filled
    assert filled.amount == 300.0
    rejected = TradeOutcome.reject(Side.BUY, "MSFT", 3, RejectReason.INSUFFICIENT_FUNDS, "no", price=100.0)
    assert not rejected.filled
    assert rejected.amount == 0.0


# --- PaperBroker ---


def test_broker_buy_fills_at_quote():
    broker = _broker()
    out = broker.buy("MSFT", 10)
    assert out.kind == OutcomeKind.FILLED
    assert out.price == 300.0
    assert out.balance == 7000.0
    assert broker.portfolio.holding("MSFT") == 10


def test_broker_uses_price_at_submission():
    broker = _broker()
    broker.buy("MSFT", 10)
    broker.market.quote("MSFT").price = 320.0
    out = broker.sell("MSFT", 10)
    assert out.price == 320.0
    assert broker.portfolio.balance == 7000.0 + 3200.0
    assert broker.portfolio.holdings == {}


def test_broker_rejects_unknown_symbol():
    broker = _broker()
    out = broker.buy("AAPL", 1)
    assert out.reason == RejectReason.SYMBOL_NOT_FOUND
    assert broker.portfolio.balance == 10_000.0


def test_broker_rejects_sell_of_unlisted_holding():
    market = Market.from_prices({"MSFT": 300.0})
    portfolio = Portfolio(balance=0.0, holdings={"DELISTED": 5})
    broker = PaperBroker(market, portfolio)
    out = broker.sell("DELISTED", 5)
    assert out.reason == RejectReason.SYMBOL_NOT_FOUND
    assert portfolio.holdings == {"DELISTED": 5}
    assert portfolio.balance == 0.0


def test_broker_passes_portfolio_rejections_through():
    broker = _broker(balance=100.0)
    assert broker.buy("MSFT", 1).reason == RejectReason.INSUFFICIENT_FUNDS
    assert broker.sell("MSFT", 1).reason == RejectReason.INSUFFICIENT_SHARES
    assert broker.buy("MSFT", 0).reason == RejectReason.INVALID_QUANTITY


def test_broker_order_log():
    broker = _broker()
    broker.buy("MSFT", 1)
    broker.buy("AAPL", 1)
    broker.sell("MSFT", 1)
    log = broker.get_order_log()
    assert [o.symbol for o, _ in log] == ["MSFT", "AAPL", "MSFT"]
    assert [s.kind for _, s in log] == [OutcomeKind.FILLED, OutcomeKind.REJECTED, OutcomeKind.FILLED]
    assert len(broker.trades()) == 2


def test_broker_logs_each_rejection_once(caplog):
    broker = _broker(balance=100.0)
    with caplog.at_level(logging.INFO, logger="stocksim"):
        broker.buy("MSFT", 1)
        broker.sell("MSFT", 1)
        broker.buy("AAPL", 1)
    rejected = [r for r in caplog.records if "rejected" in r.getMessage()]
    assert len(rejected) == 3
    assert all(r.name == "stocksim.execution.broker" for r in rejected)
