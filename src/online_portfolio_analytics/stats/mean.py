"""Arithmetic and geometric running means of a return stream."""

from __future__ import annotations

import math

from online_portfolio_analytics.models.enums import MeanMethod
from online_portfolio_analytics.stats.base import OnlineStatistic, check_growth_factor


class ArithmeticMeanReturn(OnlineStatistic[float | None]):
    """Running arithmetic mean, updated as ``mean += (r - mean) / n``."""

    __slots__ = ("_mean",)

    def __init__(self) -> None:
        super().__init__()
        self._mean: float = 0.0

    def _fit(self, r: float) -> None:
        self._mean += (r - self._mean) / self._n

    @property
    def value(self) -> float | None:
        return self._mean if self._n else None

    def _reset(self) -> None:
        self._mean = 0.0


class GeometricMeanReturn(OnlineStatistic[float | None]):
    """Geometric mean return ``exp(sum(log(1 + r)) / n) - 1``.

    Only the log-sum is kept. Returns with ``1 + r <= 0`` have no logarithm
    and are rejected with ``InvalidInputError``.
    """

    __slots__ = ("_log_sum",)

    def __init__(self) -> None:
        super().__init__()
        self._log_sum: float = 0.0

    def _validate(self, r: float) -> None:
        check_growth_factor(self, r)

    def _fit(self, r: float) -> None:
        self._log_sum += math.log1p(r)

    @property
    def value(self) -> float | None:
        if not self._n:
            return None
        return math.expm1(self._log_sum / self._n)

    def _reset(self) -> None:
        self._log_sum = 0.0


def mean_return(method: MeanMethod = MeanMethod.ARITHMETIC) -> OnlineStatistic[float | None]:
    if method == MeanMethod.ARITHMETIC:
        return ArithmeticMeanReturn()
    if method == MeanMethod.GEOMETRIC:
        return GeometricMeanReturn()
    raise ValueError(f"Unknown mean method: {method}")
