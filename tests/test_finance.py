"""Unit tests for escalation, payback search, ROI and the cash-flow projection."""

import numpy as np
import pytest

from core.finance import cumulative_cash_flow, escalate, payback_year, roi_percent
from core.utils import CashFlowPoint, round_half_up


# ---- Escalation ----

class TestEscalate:
    @pytest.mark.parametrize('base, years', [(1.0, 1), (11_835.73, 20), (500.0, 25)])
    def test_each_year_compounds(self, base, years):
        values, total = escalate(base, 0.03, years)
        expected = base * 1.03 ** np.arange(years)
        assert len(values) == years
        assert values[0] == base
        np.testing.assert_allclose(values, expected, rtol=1e-12)

    def test_total_is_direct_sum(self):
        values, total = escalate(11_835.73, 0.03, 25)
        direct = 0.0
        for v in values:
            direct += v
        assert total == direct

    def test_zero_base(self):
        values, total = escalate(0.0, 0.03, 20)
        assert values == [0.0] * 20
        assert total == 0.0

    def test_zero_years(self):
        assert escalate(100.0, 0.03, 0) == ([], 0.0)


# ---- Payback ----

class TestPayback:
    def test_first_year_reaching_cost(self):
        assert payback_year([100, 100, 100, 100], 250) == 3

    def test_tie_counts_as_payback(self):
        """Cumulative savings exactly equal to the cost pays back that year."""
        assert payback_year([100, 100, 100], 200) == 2

    def test_not_reached_is_undefined(self):
        assert payback_year([100] * 20, 5_000) is None

    def test_no_extrapolation_past_series(self):
        """Year 21 would pay back, but only the given years are searched."""
        assert payback_year([100] * 20, 2_100) is None
        assert payback_year([100] * 21, 2_100) == 21

    def test_non_positive_cost_pays_back_in_year_one(self):
        assert payback_year([100, 100], 0) == 1
        assert payback_year([100, 100], -500) == 1

    def test_monotonic_in_net_cost(self):
        """A cheaper system never pays back later than a dearer one."""
        series, _ = escalate(10_000.0, 0.03, 20)
        costs = np.linspace(-10_000, 300_000, 60)
        years = [payback_year(series, c) for c in costs]
        defined = [y for y in years if y is not None]
        assert defined == sorted(defined)
        # once undefined, stays undefined for larger costs
        first_none = years.index(None)
        assert all(y is None for y in years[first_none:])


# ---- ROI ----

class TestROI:
    def test_roi_basic(self):
        """(300 - 100) / 100 = 200%."""
        assert roi_percent(300, 100) == pytest.approx(200.0)

    def test_roi_loss(self):
        assert roi_percent(50, 100) == pytest.approx(-50.0)

    def test_roi_zero_cost_is_undefined(self):
        assert roi_percent(1_000, 0) is None
        assert roi_percent(0, 0.0) is None

    def test_roi_negative_cost_passes_through(self):
        assert roi_percent(100, -100) == pytest.approx(-200.0)


# ---- Cumulative cash flow ----

class TestCumulativeCashFlow:
    def test_points(self):
        cf = cumulative_cash_flow(1_000, [300, 300, 300, 300])
        assert cf == [
            CashFlowPoint(0, -1_000),
            CashFlowPoint(1, -700),
            CashFlowPoint(2, -400),
            CashFlowPoint(3, -100),
            CashFlowPoint(4, 200),
        ]

    def test_rounds_each_step_from_rounded_point(self):
        """0.4 a year never accumulates: each year starts from the rounded point.

        Rounding an unrounded running sum would give 0, 0, 1, 1 instead.
        """
        cf = cumulative_cash_flow(0, [0.4, 0.4, 0.4])
        assert [pt.cumulative for pt in cf] == [0, 0, 0, 0]
        unrounded = [round_half_up(x) for x in np.cumsum([0.0, 0.4, 0.4, 0.4])]
        assert unrounded == [0, 0, 1, 1]

    def test_half_rounds_up(self):
        cf = cumulative_cash_flow(0.5, [1.0])
        assert [pt.cumulative for pt in cf] == [0, 1]

    def test_length_follows_series(self):
        series, _ = escalate(1_000.0, 0.03, 25)
        cf = cumulative_cash_flow(10_000, series)
        assert len(cf) == 26
        assert cf[-1].year == 25


class TestRoundHalfUp:
    @pytest.mark.parametrize('value, expected', [
        (2.5, 3),
        (2.4999, 2),
        (-0.5, 0),
        (-1.5, -1),
        (-69_825.0, -69_825),
        (0.0, 0),
        (0.49999999999999994, 0),
        (-0.49999999999999994, 0),
        (1e15 + 0.5, 10**15 + 1),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected
