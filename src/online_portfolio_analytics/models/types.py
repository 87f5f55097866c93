"""Value types (dataclasses) returned by composite statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MomentsValue:
    """First four moments of a return stream. ``None`` means undefined."""

    mean: float | None
    std: float | None
    skewness: float | None
    kurtosis: float | None


@dataclass(slots=True)
class PerformanceSnapshot:
    """Every performance metric of one asset after a single price update."""

    n: int
    price: float
    asset_return: float | None
    arithmetic_mean: float | None
    geometric_mean: float | None
    std: float | None
    skewness: float | None
    kurtosis: float | None
    cumulative_return: float | None
    drawdown: float | None
    arithmetic_drawdown: float | None
    sharpe: float | None
    sortino: float | None
