"""Exceptions raised by online statistics."""

from __future__ import annotations


class AnalyticsError(Exception):
    """Base class for every analytics failure."""


class InvalidInputError(AnalyticsError, ValueError):
    """Observation outside the statistic's domain.

    Raised from ``update()`` before any state is touched, so the caller may
    retry with a corrected observation or abandon the stream.
    """

    def __init__(self, statistic: str, observation: float, reason: str) -> None:
        self.statistic = statistic
        self.observation = observation
        self.reason = reason
        super().__init__(f"{statistic}: rejected {observation!r} ({reason})")


class UndefinedValueError(AnalyticsError):
    """Raised by ``require_value()`` while the value is still undefined."""


class DegenerateDenominatorError(UndefinedValueError):
    """A ratio was requested while its dispersion is exactly zero."""
