"""
Column-wise driver for online statistics.

Each column of the input gets its own independent statistic. Rows are fed
in order through ``update()`` only; a missing row (``None``) is skipped and
reported as missing in the output.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from online_portfolio_analytics.stats.base import OnlineStatistic


def apply_to_columns(
    factory: Callable[[], OnlineStatistic],
    columns: Mapping[str, Sequence[float | None]],
) -> dict[str, list[Any]]:
    """Run one fresh statistic per column and collect its value per row.

    Args:
        factory: Zero-argument callable building a new statistic,
            e.g. ``SimpleAssetReturn`` or ``lambda: Sharpe(period=1)``.
        columns: Column name -> observations, all of the same length.

    Returns:
        Column name -> list of values aligned with the input rows, with
        ``None`` for missing rows and rows still in warm-up.
    """
    lengths = {len(values) for values in columns.values()}
    if len(lengths) > 1:
        raise ValueError(f"Columns must have equal length, got lengths {sorted(lengths)}")

    result: dict[str, list[Any]] = {}
    for name, values in columns.items():
        stat = factory()
        out: list[Any] = []
        for x in values:
            if x is None:
                out.append(None)
                continue
            out.append(stat.update(x))
        result[name] = out
    return result
