"""
Single-pass moments of a return stream.

The accumulator keeps the mean and the central-moment sums M2, M3, M4 and
updates them with the incremental recurrence (each new sum is expressed via
the previous sums and the new sample's deviation from the previous mean).
This avoids the cancellation of the "sum of squares minus square of sum"
formulation.
"""

from __future__ import annotations

import math

from online_portfolio_analytics.models.types import MomentsValue
from online_portfolio_analytics.stats.base import OnlineStatistic


class AssetReturnMoments(OnlineStatistic[MomentsValue | None]):
    """Mean, sample standard deviation, skewness and excess kurtosis.

    Each projection is ``None`` until enough observations exist:
        mean      n >= 1
        std       n >= 2            sqrt(M2 / (n - 1))
        skewness  n >= 3, M2 > 0    sqrt(n) * M3 / M2^1.5
        kurtosis  n >= 4, M2 > 0    n * M4 / M2^2 - 3
    """

    __slots__ = ("_mean", "_m2", "_m3", "_m4")

    def __init__(self) -> None:
        super().__init__()
        self._mean: float = 0.0
        self._m2: float = 0.0
        self._m3: float = 0.0
        self._m4: float = 0.0

    def _fit(self, x: float) -> None:
        n = self._n
        delta = x - self._mean
        delta_n = delta / n
        delta_n2 = delta_n * delta_n
        term1 = delta * delta_n * (n - 1)

        self._mean += delta_n
        # M4 and M3 read the previous M2/M3, so update highest order first
        self._m4 += (
            term1 * delta_n2 * (n * n - 3 * n + 3)
            + 6.0 * delta_n2 * self._m2
            - 4.0 * delta_n * self._m3
        )
        self._m3 += term1 * delta_n * (n - 2) - 3.0 * delta_n * self._m2
        self._m2 += term1

    @property
    def mean(self) -> float | None:
        return self._mean if self._n >= 1 else None

    @property
    def variance(self) -> float | None:
        if self._n < 2:
            return None
        return self._m2 / (self._n - 1)

    @property
    def std(self) -> float | None:
        variance = self.variance
        return math.sqrt(variance) if variance is not None else None

    @property
    def skewness(self) -> float | None:
        if self._n < 3 or self._m2 <= 0.0:
            return None
        return math.sqrt(self._n) * self._m3 / self._m2 ** 1.5

    @property
    def kurtosis(self) -> float | None:
        if self._n < 4 or self._m2 <= 0.0:
            return None
        return self._n * self._m4 / (self._m2 * self._m2) - 3.0

    @property
    def value(self) -> MomentsValue | None:
        if not self._n:
            return None
        return MomentsValue(
            mean=self.mean,
            std=self.std,
            skewness=self.skewness,
            kurtosis=self.kurtosis,
        )

    def _reset(self) -> None:
        self._mean = 0.0
        self._m2 = 0.0
        self._m3 = 0.0
        self._m4 = 0.0


class StdDev(OnlineStatistic[float | None]):
    """Sample standard deviation, projected from ``AssetReturnMoments``."""

    __slots__ = ("_moments",)

    def __init__(self) -> None:
        super().__init__()
        self._moments = AssetReturnMoments()

    def _fit(self, x: float) -> None:
        self._moments.update(x)

    @property
    def value(self) -> float | None:
        return self._moments.std

    def _reset(self) -> None:
        self._moments.reset()
