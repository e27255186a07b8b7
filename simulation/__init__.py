"""
Day-by-day simulation on top of stocksim.

Steps a market and portfolio through simulated days; computes ledger metrics;
renders console reports.
"""

from simulation.engine import DayResult, SimulatedClock, SimulationEngine, SimulationResult
from simulation.metrics import Metrics, compute_metrics
from simulation.report import format_return, print_market, print_performance, print_valuation

__all__ = [
    "DayResult",
    "SimulatedClock",
    "SimulationEngine",
    "SimulationResult",
    "Metrics",
    "compute_metrics",
    "format_return",
    "print_market",
    "print_performance",
    "print_valuation",
]
