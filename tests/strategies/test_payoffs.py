"""Tests for the intrinsic payoff library."""

import pytest

from optsim.strategies import payoffs


class TestStraddle:

    @pytest.mark.parametrize("settlement,expected", [
        (100.0, 0.0),
        (150.0, 50.0),
        (50.0, 50.0),
    ])
    def test_payoff(self, settlement, expected):
        assert payoffs.straddle(settlement, 100.0) == expected


class TestStrangle:

    def test_between_strikes_is_worthless(self):
        assert payoffs.strangle(100.0, 95.0, 105.0) == 0.0

    def test_below_put_strike(self):
        assert payoffs.strangle(90.0, 95.0, 105.0) == pytest.approx(5.0)

    def test_above_call_strike(self):
        assert payoffs.strangle(112.0, 95.0, 105.0) == pytest.approx(7.0)


class TestBullSpread:

    def test_above_both_strikes(self):
        """max(30, 0) - max(10, 0) = 20"""
        assert payoffs.bull_spread(120.0, 90.0, 110.0) == 20.0

    def test_between_strikes(self):
        assert payoffs.bull_spread(100.0, 90.0, 110.0) == 10.0

    def test_below_both_strikes(self):
        assert payoffs.bull_spread(80.0, 90.0, 110.0) == 0.0


class TestBearSpread:

    def test_below_both_strikes(self):
        assert payoffs.bear_spread(80.0, 105.0, 95.0) == pytest.approx(25.0)

    def test_at_entry_legs_offset(self):
        """Second leg is max(S - K2, 0): at S between strikes both legs pay"""
        assert payoffs.bear_spread(100.0, 105.0, 95.0) == pytest.approx(0.0)

    def test_above_both_strikes_loses(self):
        assert payoffs.bear_spread(110.0, 105.0, 95.0) == pytest.approx(-15.0)


class TestButterflySpread:

    def test_at_body(self):
        assert payoffs.butterfly_spread(100.0, 95.0, 100.0, 105.0) == pytest.approx(5.0)

    def test_above_upper_wing(self):
        assert payoffs.butterfly_spread(110.0, 95.0, 100.0, 105.0) == pytest.approx(0.0)

    def test_below_lower_wing(self):
        assert payoffs.butterfly_spread(90.0, 95.0, 100.0, 105.0) == 0.0

    def test_between_body_and_upper_wing(self):
        # 7 - 2*2 + 0
        assert payoffs.butterfly_spread(102.0, 95.0, 100.0, 105.0) == pytest.approx(3.0)
