"""
Text rendering for the console: market board, portfolio view, performance ledger.
"""

from __future__ import annotations

import sys
from typing import TextIO

from stocksim.market import Market
from stocksim.portfolio import PerformanceReport, Valuation
from simulation.metrics import Metrics, compute_metrics


def format_return(pct: float | None) -> str:
    """'10.00%', or 'n/a' when the return is undefined."""
    return "n/a" if pct is None else f"{pct:.2f}%"


def print_market(market: Market, out: TextIO | None = None) -> None:
    """One line per listed symbol with its current price."""
    out = out or sys.stdout
    print("Market Data:", file=out)
    for q in market.quotes():
        print(f"{q.symbol}: ${q.price:.2f}", file=out)


def print_valuation(valuation: Valuation, out: TextIO | None = None) -> None:
    """Holdings with current value, cash balance and total."""
    out = out or sys.stdout
    print("Current Portfolio:", file=out)
    for h in valuation.holdings.values():
        print(f"{h.symbol}: {h.quantity} shares, Current Value: ${h.value:.2f}", file=out)
    print(f"Account Balance: ${valuation.balance:.2f}", file=out)
    print(f"Total Portfolio Value: ${valuation.total:.2f}", file=out)


def print_performance(
    report: PerformanceReport,
    out: TextIO | None = None,
    *,
    with_metrics: bool = False,
) -> Metrics | None:
    """
    Print the ledger and overall return.

    With with_metrics=True, also prints drawdown and returns the Metrics.
    """
    out = out or sys.stdout
    print("Performance History:", file=out)
    for day, value in report.entries:
        print(f"{day.isoformat()}: ${value:.2f}", file=out)
    print(f"Overall Return: {format_return(report.overall_return_pct)}", file=out)
    if not with_metrics:
        return None
    metrics = compute_metrics(report.entries)
    print(f"Total PnL:       {metrics.total_pnl:,.2f}", file=out)
    print(f"Max drawdown:    {metrics.max_drawdown:,.2f} ({metrics.max_drawdown_pct:.2f}%)", file=out)
    return metrics
