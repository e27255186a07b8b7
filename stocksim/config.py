"""
Simulation settings and the factories that build a market and portfolio from them.

Defaults reproduce the classic console session: 10,000 in cash and four
listed stocks. STOCKSIM_INITIAL_BALANCE and STOCKSIM_SEED override the
defaults from the environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

import numpy as np

from stocksim.errors import ConstructionError
from stocksim.market import DEFAULT_PRICE_BAND, Market
from stocksim.portfolio import Portfolio

logger = logging.getLogger(__name__)

INITIAL_BALANCE_ENV = "STOCKSIM_INITIAL_BALANCE"
SEED_ENV = "STOCKSIM_SEED"

DEFAULT_INITIAL_BALANCE = 10_000.0
DEFAULT_SEED_QUOTES: dict[str, float] = {
    "TATA STEEL": 150.00,
    "ICICI BANK": 2800.00,
    "WIPRO": 3400.00,
    "MSFT": 300.00,
}


@dataclass
class SimulationConfig:
    """Starting cash, listed symbols with opening prices, refresh band, RNG seed."""

    initial_balance: float = DEFAULT_INITIAL_BALANCE
    seed_quotes: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_SEED_QUOTES))
    price_band: tuple[float, float] = DEFAULT_PRICE_BAND
    seed: int | None = None

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> SimulationConfig:
        """Defaults, overridden by STOCKSIM_* variables when set."""
        env = os.environ if environ is None else environ
        config = cls()
        raw_balance = env.get(INITIAL_BALANCE_ENV, "").strip()
        if raw_balance:
            try:
                config.initial_balance = float(raw_balance)
            except ValueError:
                raise ConstructionError(f"{INITIAL_BALANCE_ENV} must be a number, got {raw_balance!r}") from None
        raw_seed = env.get(SEED_ENV, "").strip()
        if raw_seed:
            try:
                config.seed = int(raw_seed)
            except ValueError:
                raise ConstructionError(f"{SEED_ENV} must be an integer, got {raw_seed!r}") from None
        return config


def build_market(config: SimulationConfig) -> Market:
    """Market listing config.seed_quotes, with a Generator seeded from config.seed."""
    rng = np.random.default_rng(config.seed)
    market = Market.from_prices(config.seed_quotes, rng=rng, price_band=config.price_band)
    logger.debug("Market built with %d symbols (seed=%s)", len(market), config.seed)
    return market


def build_portfolio(
    config: SimulationConfig,
    *,
    today: Callable[[], date] = date.today,
) -> Portfolio:
    """Empty portfolio holding config.initial_balance in cash."""
    return Portfolio(balance=config.initial_balance, today=today)
