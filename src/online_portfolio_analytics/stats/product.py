"""Running product of a stream, accumulated in log space."""

from __future__ import annotations

import math

from online_portfolio_analytics.stats.base import OnlineStatistic


class RunningProduct(OnlineStatistic[float]):
    """Track the overall product of every observation.

    A literal running multiplication over- or underflows on long series, so
    the magnitude is kept as ``sum(log|x|)`` and exponentiated on read. The
    sign is tracked as a parity bit, and a single zero pins the product at 0.

    The value before any observation is the multiplicative identity (1.0).
    """

    __slots__ = ("_log_sum", "_negative", "_zero")

    def __init__(self) -> None:
        super().__init__()
        self._log_sum: float = 0.0
        self._negative: bool = False
        self._zero: bool = False

    def _fit(self, x: float) -> None:
        if x == 0.0:
            self._zero = True
            return
        self._log_sum += math.log(abs(x))
        if x < 0.0:
            self._negative = not self._negative

    @property
    def value(self) -> float:
        if self._zero:
            return 0.0
        try:
            magnitude = math.exp(self._log_sum)
        except OverflowError:
            magnitude = math.inf
        return -magnitude if self._negative else magnitude

    @property
    def log_value(self) -> float:
        """Natural log of ``|product|`` (``-inf`` once a zero was seen)."""
        return -math.inf if self._zero else self._log_sum

    def _reset(self) -> None:
        self._log_sum = 0.0
        self._negative = False
        self._zero = False
