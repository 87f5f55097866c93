"""
Unit tests for the config module.

Tests: Settings defaults, environment variable override, validation, and
statistics falling back to the settings singleton.
"""

import pytest
from pydantic import ValidationError

from online_portfolio_analytics.config import Settings, settings
from online_portfolio_analytics.stats.ratios import Sharpe, Sortino
from online_portfolio_analytics.stats.returns import SimpleAssetReturn


class TestSettingsDefaults:
    def test_default_annualization_period(self, monkeypatch):
        monkeypatch.delenv("ANNUALIZATION_PERIOD", raising=False)
        assert Settings().annualization_period == 252

    def test_default_risk_free(self, monkeypatch):
        monkeypatch.delenv("RISK_FREE_RATE", raising=False)
        assert Settings().risk_free_rate == 0.0

    def test_default_return_period(self, monkeypatch):
        monkeypatch.delenv("RETURN_PERIOD", raising=False)
        assert Settings().return_period == 1


class TestSettingsEnvironment:
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ANNUALIZATION_PERIOD", "12")
        monkeypatch.setenv("RISK_FREE_RATE", "0.001")
        s = Settings()
        assert s.annualization_period == 12
        assert s.risk_free_rate == pytest.approx(0.001)

    def test_non_positive_period_rejected(self, monkeypatch):
        monkeypatch.setenv("ANNUALIZATION_PERIOD", "0")
        with pytest.raises(ValidationError):
            Settings()


class TestStatisticsUseSettings:
    def test_ratio_defaults(self, monkeypatch):
        monkeypatch.setattr(settings, "annualization_period", 52)
        monkeypatch.setattr(settings, "risk_free_rate", 0.002)
        sharpe = Sharpe()
        sortino = Sortino()
        assert sharpe.period == 52
        assert sharpe.risk_free == 0.002
        assert sortino.period == 52
        assert sortino.risk_free == 0.002

    def test_explicit_arguments_win(self, monkeypatch):
        monkeypatch.setattr(settings, "annualization_period", 52)
        assert Sharpe(period=1, risk_free=0.0).period == 1

    def test_return_period_default(self, monkeypatch):
        monkeypatch.setattr(settings, "return_period", 5)
        assert SimpleAssetReturn().period == 5
