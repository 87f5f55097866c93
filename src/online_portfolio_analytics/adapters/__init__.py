"""Adapters that drive statistics over tabular inputs."""

from online_portfolio_analytics.adapters.columns import apply_to_columns  # noqa: F401
