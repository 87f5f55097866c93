"""Core enums used throughout the analytics package."""

from __future__ import annotations

from enum import Enum


# ─── Variants ─────────────────────────────────────────────────────────────────


class ReturnMethod(str, Enum):
    """How a pair of prices turns into a period return."""

    SIMPLE = "SIMPLE"
    LOG = "LOG"


class MeanMethod(str, Enum):
    ARITHMETIC = "ARITHMETIC"
    GEOMETRIC = "GEOMETRIC"


class DrawDownMethod(str, Enum):
    GEOMETRIC = "GEOMETRIC"      # compounded wealth level
    ARITHMETIC = "ARITHMETIC"    # running sum of returns


# ─── Lifecycle ────────────────────────────────────────────────────────────────


class StatisticState(str, Enum):
    """Warm-up state of a statistic. There is no terminal state."""

    WARMING = "WARMING"
    READY = "READY"
