"""
Tests for the console harness: scripted sessions through TradingConsole and main().
"""

import io
from datetime import date

import pytest

from stocksim import Market, Portfolio
from stocksim.cli import TradingConsole, main


def _console(script: str, balance: float = 10_000.0, holdings=None):
    market = Market.from_prices({"MSFT": 300.0, "TATA STEEL": 150.0})
    portfolio = Portfolio(balance=balance, holdings=holdings or {}, today=lambda: date(2024, 1, 2))
    out = io.StringIO()
    console = TradingConsole(market, portfolio, stdin=io.StringIO(script), stdout=out)
    return console, out


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("STOCKSIM_INITIAL_BALANCE", raising=False)
    monkeypatch.delenv("STOCKSIM_SEED", raising=False)


# --- TradingConsole ---


def test_buy_then_view_portfolio():
    console, out = _console("2\nmsft\n10\n4\n6\n")
    console.run()
    text = out.getvalue()
    assert "Bought 10 shares of MSFT" in text
    assert "MSFT: 10 shares, Current Value: $3000.00" in text
    assert "Account Balance: $7000.00" in text
    assert "Total Portfolio Value: $10000.00" in text
    assert text.rstrip().endswith("Exiting...")
    assert console.portfolio.holdings == {"MSFT": 10}


def test_symbol_with_space_and_quantity_retry():
    console, out = _console("2\ntata steel\nabc\n0\n2\n6\n")
    console.run()
    text = out.getvalue()
    assert "Invalid input. Please enter a number: " in text
    assert "Please enter a positive number: " in text
    assert console.portfolio.holdings == {"TATA STEEL": 2}


def test_buy_unknown_symbol():
    console, out = _console("2\naapl\n6\n")
    console.run()
    assert "Invalid stock symbol." in out.getvalue()


def test_buy_insufficient_funds():
    console, out = _console("2\nmsft\n100\n6\n", balance=1000.0)
    console.run()
    assert "Insufficient funds to buy 100 shares of MSFT" in out.getvalue()
    assert console.portfolio.balance == 1000.0


def test_sell_not_owned():
    console, out = _console("3\nmsft\n6\n")
    console.run()
    assert "You do not own any shares of MSFT" in out.getvalue()


def test_sell_more_than_held():
    console, out = _console("3\nmsft\n5\n6\n", holdings={"MSFT": 2})
    console.run()
    assert "Insufficient shares to sell 5 shares of MSFT" in out.getvalue()
    assert console.portfolio.holdings == {"MSFT": 2}


def test_sell_all():
    console, out = _console("3\nMSFT\n2\n6\n", balance=0.0, holdings={"MSFT": 2})
    console.run()
    assert "Sold 2 shares of MSFT" in out.getvalue()
    assert console.portfolio.holdings == {}
    assert console.portfolio.balance == 600.0


def test_performance_empty_then_recorded():
    console, out = _console("5\n4\n5\n6\n")
    console.run()
    text = out.getvalue()
    assert "No performance history available." in text
    assert "2024-01-02: $10000.00" in text
    assert "Overall Return: 0.00%" in text


def test_invalid_menu_input():
    console, out = _console("x\n9\n6\n")
    console.run()
    text = out.getvalue()
    assert "Invalid input. Please enter a number." in text
    assert "Invalid option. Please try again." in text


def test_view_market_refreshes_prices():
    console, out = _console("1\n6\n")
    before = console.market.prices()
    console.run()
    after = console.market.prices()
    assert "Market Data:" in out.getvalue()
    for sym, price in after.items():
        assert before[sym] * 0.95 <= price < before[sym] * 1.05


def test_eof_exits_cleanly():
    console, out = _console("2\nmsft\n")
    console.run()
    assert out.getvalue().rstrip().endswith("Exiting...")
    assert console.portfolio.holdings == {}


# --- main ---


def test_main_runs_session():
    out = io.StringIO()
    code = main(["--balance", "500", "--seed", "1"], stdin=io.StringIO("4\n6\n"), stdout=out)
    assert code == 0
    assert "Total Portfolio Value: $500.00" in out.getvalue()


def test_main_negative_balance_fails_setup(capsys):
    code = main(["--balance", "-1"], stdin=io.StringIO("6\n"), stdout=io.StringIO())
    assert code == 2
    assert "Initial balance cannot be negative." in capsys.readouterr().err
