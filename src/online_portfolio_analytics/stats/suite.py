"""
PerformanceSuite: updates every performance metric of one asset from a
single price per call and returns a complete ``PerformanceSnapshot``.
"""

from __future__ import annotations

import logging

from online_portfolio_analytics.errors import InvalidInputError
from online_portfolio_analytics.models.enums import ReturnMethod
from online_portfolio_analytics.models.types import PerformanceSnapshot
from online_portfolio_analytics.stats.base import check_growth_factor
from online_portfolio_analytics.stats.drawdowns import (
    ArithmeticDrawDowns,
    CumulativeReturn,
    DrawDowns,
)
from online_portfolio_analytics.stats.mean import ArithmeticMeanReturn, GeometricMeanReturn
from online_portfolio_analytics.stats.moments import AssetReturnMoments
from online_portfolio_analytics.stats.ratios import Sharpe, Sortino
from online_portfolio_analytics.stats.returns import asset_return

logger = logging.getLogger(__name__)


class PerformanceSuite:
    """Compute all return-based metrics of one asset in O(1) per price.

    Prices feed a simple or log asset return (per ``method``); each return
    it produces is forwarded to the downstream metrics. A price is checked
    against every metric before any of them moves, so a rejected price
    leaves the whole suite untouched. The first ``period`` prices only
    warm up the return window, so every downstream field is ``None`` until
    then.
    """

    def __init__(
        self,
        period: int | None = None,
        method: ReturnMethod = ReturnMethod.SIMPLE,
        annualization_period: int | None = None,
        risk_free: float | None = None,
    ) -> None:
        self.asset_return = asset_return(method, period)

        # Location
        self.arithmetic_mean = ArithmeticMeanReturn()
        self.geometric_mean = GeometricMeanReturn()

        # Dispersion & shape
        self.moments = AssetReturnMoments()

        # Path
        self.cumulative_return = CumulativeReturn()
        self.drawdowns = DrawDowns()
        self.arithmetic_drawdowns = ArithmeticDrawDowns()

        # Risk-adjusted
        self.sharpe = Sharpe(annualization_period, risk_free)
        self.sortino = Sortino(annualization_period, risk_free)

    def update(self, price: float) -> PerformanceSnapshot:
        """Absorb one price and return the full snapshot."""
        if price <= 0.0:
            logger.debug("PerformanceSuite rejected non-positive price %r", price)
            raise InvalidInputError(type(self).__name__, price, "price must be > 0")

        # The strictest downstream domain is 1 + r finite and > 0
        candidate = self.asset_return.peek(price)
        if candidate is not None:
            check_growth_factor(self.geometric_mean, candidate)

        r = self.asset_return.update(price)
        if r is not None:
            for stat in self._return_stats():
                stat.update(r)

        moments = self.moments.value
        return PerformanceSnapshot(
            n=self.asset_return.n,
            price=price,
            asset_return=r,
            arithmetic_mean=self.arithmetic_mean.value,
            geometric_mean=self.geometric_mean.value,
            std=moments.std if moments is not None else None,
            skewness=moments.skewness if moments is not None else None,
            kurtosis=moments.kurtosis if moments is not None else None,
            cumulative_return=self.cumulative_return.value,
            drawdown=self.drawdowns.value,
            arithmetic_drawdown=self.arithmetic_drawdowns.value,
            sharpe=self.sharpe.value,
            sortino=self.sortino.value,
        )

    @property
    def n(self) -> int:
        """Prices absorbed so far."""
        return self.asset_return.n

    @property
    def ready(self) -> bool:
        """True once every metric in the suite has a defined value."""
        return all(stat.ready for stat in self._return_stats())

    def reset_all(self) -> None:
        """Full reset of all metrics."""
        self.asset_return.reset()
        for stat in self._return_stats():
            stat.reset()

    def _return_stats(self) -> tuple:
        return (
            self.arithmetic_mean,
            self.geometric_mean,
            self.moments,
            self.cumulative_return,
            self.drawdowns,
            self.arithmetic_drawdowns,
            self.sharpe,
            self.sortino,
        )
