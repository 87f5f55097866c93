"""
Unit tests for cumulative return and drawdowns.
"""

import pytest

from online_portfolio_analytics.data.sample_data import NFLX, TSLA, generate_prices
from online_portfolio_analytics.errors import InvalidInputError
from online_portfolio_analytics.models.enums import DrawDownMethod
from online_portfolio_analytics.stats.drawdowns import (
    ArithmeticDrawDowns,
    CumulativeReturn,
    DrawDowns,
    drawdown,
)
from online_portfolio_analytics.stats.returns import SimpleAssetReturn


def _returns(prices):
    ret = SimpleAssetReturn()
    return [r for r in map(ret.update, prices) if r is not None]


TSLA_LEVELS = [
    1.12452, 0.957232, 0.946518, 1.00536, 0.885979, 0.963183,
    0.973812, 1.0426, 1.09893, 1.57865, 1.62223, 1.49758,
]
TSLA_DRAWDOWNS = [
    0.0, -0.148766, -0.158293, -0.10597, -0.212128, -0.143473,
    -0.134021, -0.0728517, -0.0227591, 0.0, 0.0, -0.0768384,
]
NFLX_DRAWDOWNS = [
    0.0, 0.0, -0.0319013, -0.0471003, -0.0668832, -0.0197458,
    -0.0394915, 0.0, 0.0, 0.0, -0.0701279, -0.127291,
]


class TestCumulativeReturn:
    def test_undefined_before_first_return(self):
        assert CumulativeReturn().value is None

    def test_compounding(self):
        cum = CumulativeReturn()
        cum.update(0.1)
        assert cum.update(-0.1) == pytest.approx(1.1 * 0.9 - 1.0)

    def test_tsla_levels(self):
        cum = CumulativeReturn()
        values = [cum.update(r) for r in _returns(TSLA)]
        assert [v + 1.0 for v in values] == pytest.approx(TSLA_LEVELS, rel=1e-5)

    def test_total_return_matches_price_ratio(self):
        prices = generate_prices(n=500)
        cum = CumulativeReturn().fit(_returns(prices))
        assert cum.value == pytest.approx(prices[-1] / prices[0] - 1.0, rel=1e-9)

    @pytest.mark.parametrize("r", [-1.0, -3.0])
    def test_rejects_total_loss_without_state_change(self, r):
        cum = CumulativeReturn()
        cum.update(0.2)
        with pytest.raises(InvalidInputError):
            cum.update(r)
        assert cum.n == 1
        assert cum.value == pytest.approx(0.2)


class TestDrawDowns:
    def test_tsla_series(self):
        dd = DrawDowns()
        values = [dd.update(r) for r in _returns(TSLA)]
        assert values == pytest.approx(TSLA_DRAWDOWNS, abs=1e-5)

    def test_nflx_series(self):
        dd = DrawDowns()
        values = [dd.update(r) for r in _returns(NFLX)]
        assert values == pytest.approx(NFLX_DRAWDOWNS, abs=1e-5)

    def test_exact_zero_at_new_peaks(self):
        dd = DrawDowns()
        values = [dd.update(r) for r in _returns(TSLA)]
        assert [i for i, v in enumerate(values) if v == 0.0] == [0, 9, 10]

    def test_first_observation_sets_peak(self):
        dd = DrawDowns()
        assert dd.update(-0.3) == 0.0
        assert dd.update(-0.1) == pytest.approx(-0.1)

    def test_never_positive(self):
        dd = DrawDowns()
        for r in _returns(generate_prices(n=1_000, volatility=0.03, seed=3)):
            value = dd.update(r)
            assert value <= 0.0

    def test_rejects_total_loss_without_state_change(self):
        dd = DrawDowns()
        dd.fit([0.1, -0.2])
        before = dd.value
        with pytest.raises(InvalidInputError):
            dd.update(-1.0)
        assert dd.n == 2
        assert dd.value == before
        assert dd.update(0.0) == pytest.approx(before)

    def test_reset(self):
        dd = DrawDowns().fit([0.1, -0.2])
        dd.reset()
        assert dd.n == 0
        assert dd.value is None
        assert dd.update(-0.5) == 0.0


class TestArithmeticDrawDowns:
    def test_running_sum_retracement(self):
        dd = ArithmeticDrawDowns()
        values = [dd.update(r) for r in (0.1, -0.05, -0.02, 0.1, -0.01)]
        assert values == pytest.approx([0.0, -0.05, -0.07, 0.0, -0.01])
        assert values[0] == 0.0
        assert values[3] == 0.0

    def test_tsla_first_steps(self):
        dd = ArithmeticDrawDowns()
        values = [dd.update(r) for r in _returns(TSLA)]
        assert values[0] == 0.0
        assert values[1] == pytest.approx(-0.148766, abs=1e-6)
        # -0.148766 - 0.011192
        assert values[2] == pytest.approx(-0.159958, abs=1e-6)
        assert max(values) == 0.0

    def test_accepts_any_return(self):
        dd = ArithmeticDrawDowns()
        dd.update(0.5)
        assert dd.update(-2.0) == pytest.approx(-2.0)

    def test_factory(self):
        assert isinstance(drawdown(DrawDownMethod.GEOMETRIC), DrawDowns)
        assert isinstance(drawdown(DrawDownMethod.ARITHMETIC), ArithmeticDrawDowns)
