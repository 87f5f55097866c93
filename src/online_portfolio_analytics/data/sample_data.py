"""
Sample price data for examples and tests.

Month-end closes of TSLA, NFLX and MSFT from 2020-12-31 to 2021-12-31, plus
a synthetic log-normal price generator. No external data needed.
"""

from __future__ import annotations

import calendar
import math
import random
from datetime import date

TSLA: tuple[float, ...] = (
    235.22, 264.51, 225.16, 222.64, 236.48, 208.4, 226.56,
    229.06, 245.24, 258.49, 371.33, 381.58, 352.26,
)

NFLX: tuple[float, ...] = (
    540.73, 532.39, 538.85, 521.66, 513.47, 502.81, 528.21,
    517.57, 569.19, 610.34, 690.31, 641.9, 602.44,
)

MSFT: tuple[float, ...] = (
    222.42, 231.96, 232.38, 235.77, 252.18, 249.68, 270.9,
    284.91, 301.88, 281.92, 331.62, 330.59, 336.32,
)

# Portfolio weights for (TSLA, NFLX, MSFT)
WEIGHTS: tuple[float, ...] = (0.4, 0.4, 0.2)


def month_ends(start_year: int = 2020, start_month: int = 12, count: int = 13) -> list[date]:
    """Consecutive month-end dates starting at the given month."""
    dates: list[date] = []
    year, month = start_year, start_month
    for _ in range(count):
        dates.append(date(year, month, calendar.monthrange(year, month)[1]))
        month += 1
        if month > 12:
            year, month = year + 1, 1
    return dates


DATES: list[date] = month_ends()


def sample_prices() -> dict[str, list[float]]:
    """The three sample series as columns keyed by ticker."""
    return {"TSLA": list(TSLA), "NFLX": list(NFLX), "MSFT": list(MSFT)}


def generate_prices(
    n: int = 200,
    start_price: float = 100.0,
    volatility: float = 0.01,
    trend: float = 0.0002,
    seed: int | None = 42,
) -> list[float]:
    """Generate a log-normal price path.

    Args:
        n: Number of prices to generate.
        start_price: Price before the first step.
        volatility: Per-step standard deviation of log returns.
        trend: Drift per step (+ve = uptrend, -ve = downtrend).
        seed: Random seed for reproducibility.
    """
    rng = random.Random(seed)
    prices: list[float] = []
    price = start_price
    for _ in range(n):
        price *= math.exp(trend + volatility * rng.gauss(0, 1))
        prices.append(price)
    return prices
