"""
Execution layer: trade outcomes and the paper broker.

Orders are filled at the current market quote; rejections are values, not
exceptions.
"""

from stocksim.execution.types import OutcomeKind, RejectReason, TradeOutcome
from stocksim.execution.broker import PaperBroker

__all__ = [
    "OutcomeKind",
    "PaperBroker",
    "RejectReason",
    "TradeOutcome",
]
