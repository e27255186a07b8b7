"""
Ledger metrics: PnL, total return, drawdown.

Works on any date-ordered (date, value) sequence: a PerformanceReport's
entries or a SimulationResult's equity curve.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

import numpy as np


@dataclass
class Metrics:
    """Summary of a performance ledger."""

    initial_value: float
    final_value: float
    total_pnl: float
    total_return_pct: float | None
    max_drawdown: float
    max_drawdown_pct: float
    samples: int


def compute_metrics(ledger: Sequence[tuple[date, float]]) -> Metrics:
    """
    Compute metrics from a date-ordered ledger.

    Parameters
    ----------
    ledger : sequence of (date, value)
        Samples in chronological order. Must not be empty.

    Returns
    -------
    Metrics
        total_return_pct is None when the first value is 0.
    """
    if not ledger:
        raise ValueError("Cannot compute metrics for an empty ledger")

    values = np.array([v for _, v in ledger], dtype=float)
    initial_value = float(values[0])
    final_value = float(values[-1])
    total_pnl = final_value - initial_value
    total_return_pct = (total_pnl / initial_value * 100.0) if initial_value else None

    peak = np.maximum.accumulate(values)
    drawdowns = peak - values
    worst = int(np.argmax(drawdowns))
    max_drawdown = float(drawdowns[worst])
    max_dd_pct = float(max_drawdown / peak[worst] * 100.0) if peak[worst] > 0 else 0.0

    return Metrics(
        initial_value=initial_value,
        final_value=final_value,
        total_pnl=total_pnl,
        total_return_pct=total_return_pct,
        max_drawdown=max_drawdown,
        max_drawdown_pct=max_dd_pct,
        samples=len(values),
    )
