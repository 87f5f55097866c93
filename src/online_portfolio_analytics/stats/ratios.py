"""
Risk-adjusted ratios built from a running mean and a running dispersion.

    ratio = (mean - risk_free) * sqrt(period) / dispersion

Sharpe divides by the sample standard deviation, Sortino by the downside
deviation below ``risk_free``. A ratio is ``WARMING`` until its dispersion
is defined and ``READY`` from then on. While the dispersion is undefined or
exactly zero the value is ``None``, never an infinity.

A single observation leaves Sharpe undefined: the sample standard deviation
needs n >= 2, and no fallback value is substituted.
"""

from __future__ import annotations

import math

from online_portfolio_analytics.config import settings
from online_portfolio_analytics.errors import DegenerateDenominatorError
from online_portfolio_analytics.models.enums import StatisticState
from online_portfolio_analytics.stats.base import OnlineStatistic
from online_portfolio_analytics.stats.mean import ArithmeticMeanReturn
from online_portfolio_analytics.stats.moments import StdDev


class DownsideDeviation(OnlineStatistic[float | None]):
    """Downside deviation ``sqrt(sum(min(r - threshold, 0)^2) / n)``.

    Returns above the threshold count towards ``n`` with a zero deviation;
    they are not dropped from the denominator.
    """

    __slots__ = ("threshold", "_sum_sq")

    def __init__(self, threshold: float = 0.0) -> None:
        super().__init__()
        self.threshold = threshold
        self._sum_sq: float = 0.0

    def _fit(self, r: float) -> None:
        shortfall = r - self.threshold
        if shortfall < 0.0:
            self._sum_sq += shortfall * shortfall

    @property
    def value(self) -> float | None:
        if not self._n:
            return None
        return math.sqrt(self._sum_sq / self._n)

    def _reset(self) -> None:
        self._sum_sq = 0.0


class _Ratio(OnlineStatistic[float | None]):
    __slots__ = ("period", "risk_free", "_mean", "_dispersion")

    def __init__(
        self,
        dispersion: OnlineStatistic[float | None],
        period: int | None,
        risk_free: float | None,
    ) -> None:
        super().__init__()
        period = settings.annualization_period if period is None else period
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        self.period = period
        self.risk_free = settings.risk_free_rate if risk_free is None else risk_free
        self._mean = ArithmeticMeanReturn()
        self._dispersion = dispersion

    def _fit(self, r: float) -> None:
        self._mean.update(r)
        self._dispersion.update(r)

    @property
    def state(self) -> StatisticState:
        """``WARMING`` until the dispersion is defined, ``READY`` from then on.

        ``READY`` does not imply a defined ``value``: a zero dispersion (for
        Sortino, no return below ``risk_free`` yet) keeps ``value`` at
        ``None`` while the state stays ``READY``.
        """
        if self._dispersion.value is None:
            return StatisticState.WARMING
        return StatisticState.READY

    @property
    def value(self) -> float | None:
        dispersion = self._dispersion.value
        if dispersion is None or dispersion == 0.0:
            return None
        excess = self._mean.value - self.risk_free
        return excess * math.sqrt(self.period) / dispersion

    def require_value(self) -> float:
        if self._dispersion.value == 0.0:
            raise DegenerateDenominatorError(
                f"{type(self).__name__} dispersion is zero after n={self._n} observations"
            )
        return super().require_value()

    def _reset(self) -> None:
        self._mean.reset()
        self._dispersion.reset()


class Sharpe(_Ratio):
    """Sharpe ratio over the sample standard deviation of returns.

    Args:
        period: Annualization factor. Daily (252), Hourly (252*6.5),
            Minutely (252*6.5*60) ...
        risk_free: Constant risk-free return per observation period.
    """

    __slots__ = ()

    def __init__(self, period: int | None = None, risk_free: float | None = None) -> None:
        super().__init__(StdDev(), period, risk_free)


class Sortino(_Ratio):
    """Sortino ratio over the downside deviation below ``risk_free``.

    Until a return falls below ``risk_free`` the downside deviation is 0
    and the ratio stays undefined.
    """

    __slots__ = ()

    def __init__(self, period: int | None = None, risk_free: float | None = None) -> None:
        risk_free = settings.risk_free_rate if risk_free is None else risk_free
        super().__init__(DownsideDeviation(threshold=risk_free), period, risk_free)
