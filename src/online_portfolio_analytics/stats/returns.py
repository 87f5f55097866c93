"""
Asset returns from a price stream.

Both variants keep a window of the last ``period + 1`` prices. ``n`` counts
prices absorbed, so the first ``period`` updates leave ``value`` undefined.
"""

from __future__ import annotations

import collections
import logging
import math
from abc import abstractmethod

from online_portfolio_analytics.config import settings
from online_portfolio_analytics.errors import InvalidInputError
from online_portfolio_analytics.models.enums import ReturnMethod
from online_portfolio_analytics.stats.base import OnlineStatistic

logger = logging.getLogger(__name__)


class AssetReturn(OnlineStatistic[float | None]):
    """Common window handling for simple and log returns."""

    __slots__ = ("period", "_prices")

    def __init__(self, period: int | None = None) -> None:
        super().__init__()
        period = settings.return_period if period is None else period
        if period < 1:
            raise ValueError(f"period must be a positive integer, got {period}")
        self.period = period
        self._prices: collections.deque[float] = collections.deque(maxlen=period + 1)

    def _fit(self, price: float) -> None:
        self._prices.append(price)

    @property
    def value(self) -> float | None:
        if len(self._prices) <= self.period:
            return None
        return self._compute(self._prices[-1], self._prices[0])

    def peek(self, price: float) -> float | None:
        """Return the value ``update(price)`` would produce, without absorbing it.

        Raises ``InvalidInputError`` exactly when ``update(price)`` would.
        """
        self.check(price)
        if len(self._prices) < self.period:
            return None
        # after the append, the oldest price left in the window
        return self._compute(price, self._prices[-self.period])

    @abstractmethod
    def _compute(self, price: float, reference: float) -> float | None:
        ...

    def _reset(self) -> None:
        self._prices.clear()


class SimpleAssetReturn(AssetReturn):
    """Simple return ``p_t / p_{t-period} - 1``.

    Zero or negative prices are accepted arithmetically. A zero reference
    price leaves the value undefined.
    """

    __slots__ = ()

    def _compute(self, price: float, reference: float) -> float | None:
        if reference == 0.0:
            return None
        return price / reference - 1.0


class LogAssetReturn(AssetReturn):
    """Log return ``ln(p_t) - ln(p_{t-period})``. Prices must be positive."""

    __slots__ = ()

    def _validate(self, price: float) -> None:
        if price <= 0.0:
            logger.debug("LogAssetReturn rejected non-positive price %r", price)
            raise InvalidInputError(type(self).__name__, price, "price must be > 0")

    def _compute(self, price: float, reference: float) -> float:
        return math.log(price) - math.log(reference)


def asset_return(
    method: ReturnMethod = ReturnMethod.SIMPLE, period: int | None = None
) -> AssetReturn:
    """Build the asset return statistic for ``method``."""
    if method == ReturnMethod.SIMPLE:
        return SimpleAssetReturn(period)
    if method == ReturnMethod.LOG:
        return LogAssetReturn(period)
    raise ValueError(f"Unknown return method: {method}")
