"""
Cumulative return and drawdowns.

Geometric drawdowns compound returns through a ``CumulativeReturn``;
arithmetic drawdowns work on the plain running sum of returns. In both,
the first observation sets the initial peak, and any level at or above the
running peak reports exactly ``0.0``.
"""

from __future__ import annotations

from online_portfolio_analytics.models.enums import DrawDownMethod
from online_portfolio_analytics.stats.base import OnlineStatistic, check_growth_factor
from online_portfolio_analytics.stats.product import RunningProduct


class CumulativeReturn(OnlineStatistic[float | None]):
    """Compounded return ``prod(1 + r) - 1``."""

    __slots__ = ("_product",)

    def __init__(self) -> None:
        super().__init__()
        self._product = RunningProduct()

    def _validate(self, r: float) -> None:
        check_growth_factor(self, r)

    def _fit(self, r: float) -> None:
        self._product.update(1.0 + r)

    @property
    def value(self) -> float | None:
        if not self._n:
            return None
        return self._product.value - 1.0

    def _reset(self) -> None:
        self._product.reset()


class DrawDowns(OnlineStatistic[float | None]):
    """Geometric drawdown ``(1 + cumret) / peak - 1``, always <= 0."""

    __slots__ = ("_cumulative", "_peak", "_drawdown")

    def __init__(self) -> None:
        super().__init__()
        self._cumulative = CumulativeReturn()
        self._peak: float | None = None
        self._drawdown: float | None = None

    def _validate(self, r: float) -> None:
        check_growth_factor(self, r)

    def _fit(self, r: float) -> None:
        level = 1.0 + self._cumulative.update(r)
        if self._peak is None or level >= self._peak:
            self._peak = level
            self._drawdown = 0.0
        else:
            self._drawdown = level / self._peak - 1.0

    @property
    def value(self) -> float | None:
        return self._drawdown

    def _reset(self) -> None:
        self._cumulative.reset()
        self._peak = None
        self._drawdown = None


class ArithmeticDrawDowns(OnlineStatistic[float | None]):
    """Arithmetic drawdown ``sum(r) - peak(sum(r))``, always <= 0."""

    __slots__ = ("_sum", "_peak", "_drawdown")

    def __init__(self) -> None:
        super().__init__()
        self._sum: float = 0.0
        self._peak: float | None = None
        self._drawdown: float | None = None

    def _fit(self, r: float) -> None:
        self._sum += r
        if self._peak is None or self._sum >= self._peak:
            self._peak = self._sum
            self._drawdown = 0.0
        else:
            self._drawdown = self._sum - self._peak

    @property
    def value(self) -> float | None:
        return self._drawdown

    def _reset(self) -> None:
        self._sum = 0.0
        self._peak = None
        self._drawdown = None


def drawdown(
    method: DrawDownMethod = DrawDownMethod.GEOMETRIC,
) -> OnlineStatistic[float | None]:
    if method == DrawDownMethod.GEOMETRIC:
        return DrawDowns()
    if method == DrawDownMethod.ARITHMETIC:
        return ArithmeticDrawDowns()
    raise ValueError(f"Unknown drawdown method: {method}")
