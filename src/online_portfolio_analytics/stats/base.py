"""
Online statistic contract shared by every metric.

A statistic consumes one observation per ``update()`` call in O(1) time and
memory. ``value`` is a pure read that returns ``None`` while the statistic
is undefined (warm-up, degenerate denominator); it never returns NaN.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from online_portfolio_analytics.errors import InvalidInputError, UndefinedValueError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OnlineStatistic(ABC, Generic[T]):
    """Abstract streaming statistic.

    Subclasses implement ``_fit`` (absorb one observation), ``value`` and
    ``_reset``. Non-finite observations are always rejected; further domain
    checks go in ``_validate``. Both run before any state (including ``n``)
    is touched.
    """

    __slots__ = ("_n",)

    def __init__(self) -> None:
        self._n: int = 0

    def update(self, x: float) -> T:
        """Absorb one observation and return the updated value."""
        self.check(x)
        self._n += 1
        self._fit(x)
        return self.value

    def check(self, x: float) -> None:
        """Raise ``InvalidInputError`` if ``update(x)`` would reject ``x``."""
        if not math.isfinite(x):
            logger.debug("%s rejected non-finite observation %r", type(self).__name__, x)
            raise InvalidInputError(type(self).__name__, x, "observation must be finite")
        self._validate(x)

    def fit(self, xs: Iterable[float]) -> OnlineStatistic[T]:
        """Feed observations in order, one at a time."""
        for x in xs:
            self.update(x)
        return self

    @property
    def n(self) -> int:
        """Number of observations absorbed so far."""
        return self._n

    observation_count = n

    @property
    @abstractmethod
    def value(self) -> T:
        ...

    @property
    def ready(self) -> bool:
        return self.value is not None

    def require_value(self) -> T:
        """Return ``value`` or raise ``UndefinedValueError``."""
        value = self.value
        if value is None:
            raise UndefinedValueError(
                f"{type(self).__name__} is undefined after n={self._n} observations"
            )
        return value

    def reset(self) -> None:
        self._n = 0
        self._reset()

    def _validate(self, x: float) -> None:
        """Raise ``InvalidInputError`` if ``x`` is outside the domain."""

    @abstractmethod
    def _fit(self, x: float) -> None:
        ...

    @abstractmethod
    def _reset(self) -> None:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}: n={self._n} | value={self.value}"


def check_growth_factor(statistic: OnlineStatistic, r: float) -> None:
    """Reject a non-finite return or one whose growth factor ``1 + r`` is not positive."""
    if not math.isfinite(r) or 1.0 + r <= 0.0:
        logger.debug("%s rejected return %r: 1 + r must be finite and > 0", type(statistic).__name__, r)
        raise InvalidInputError(type(statistic).__name__, r, "1 + return must be finite and > 0")
