"""
Central configuration for online portfolio analytics.

All settings are loaded from environment variables with sensible defaults.
Statistic constructors fall back to these values when an argument is left
as ``None``.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Analytics defaults loaded from environment variables."""

    # --- Ratios ---
    # Daily (252), Hourly (252*6.5), Minutely (252*6.5*60) ...
    annualization_period: int = Field(default=252, gt=0)
    risk_free_rate: float = 0.0

    # --- Asset returns ---
    return_period: int = Field(default=1, gt=0)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


# Singleton settings instance
settings = Settings()
