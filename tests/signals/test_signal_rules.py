"""Tests for per-strategy signal rules and the signal generator."""

import pytest

from optsim.config.defaults import ThresholdParams
from optsim.signals import rules
from optsim.signals.generator import SignalGenerator
from optsim.signals.models import Signal
from optsim.strategies.models import StrategyId


class TestVolatilityBandRules:
    """Straddle and strangle have ENTER / HOLD / EXIT bands."""

    @pytest.mark.parametrize("volatility,expected", [
        (0.02, Signal.ENTER),
        (0.0101, Signal.ENTER),
        (0.01, Signal.HOLD),       # not strictly above the high threshold
        (0.007, Signal.HOLD),
        (0.005, Signal.HOLD),      # not strictly below the low threshold
        (0.0049, Signal.EXIT),
        (0.0, Signal.EXIT),
    ])
    def test_straddle(self, make_snapshot, volatility, expected):
        thresholds = ThresholdParams()
        assert rules.straddle_signal(make_snapshot(volatility=volatility), thresholds) == expected

    @pytest.mark.parametrize("volatility,expected", [
        (0.02, Signal.ENTER),
        (0.011, Signal.HOLD),
        (0.012, Signal.HOLD),
        (0.007, Signal.HOLD),
        (0.006, Signal.EXIT),
        (0.0, Signal.EXIT),
    ])
    def test_strangle(self, make_snapshot, volatility, expected):
        thresholds = ThresholdParams()
        assert rules.strangle_signal(make_snapshot(volatility=volatility), thresholds) == expected

    def test_thresholds_are_configurable(self, make_snapshot):
        thresholds = ThresholdParams(volatility_high=0.5, volatility_low=0.4)
        assert rules.straddle_signal(make_snapshot(volatility=0.45), thresholds) == Signal.HOLD
        assert rules.straddle_signal(make_snapshot(volatility=0.02), thresholds) == Signal.EXIT


class TestBinaryRules:
    """Spread strategies never produce HOLD."""

    def test_bull_spread(self, make_snapshot):
        thresholds = ThresholdParams()
        assert rules.bull_spread_signal(make_snapshot(short_ma=101.0, long_ma=100.0), thresholds) == Signal.ENTER
        assert rules.bull_spread_signal(make_snapshot(short_ma=99.0, long_ma=100.0), thresholds) == Signal.EXIT
        assert rules.bull_spread_signal(make_snapshot(short_ma=100.0, long_ma=100.0), thresholds) == Signal.EXIT

    def test_bear_spread(self, make_snapshot):
        thresholds = ThresholdParams()
        assert rules.bear_spread_signal(make_snapshot(short_ma=99.0, long_ma=100.0), thresholds) == Signal.ENTER
        assert rules.bear_spread_signal(make_snapshot(short_ma=101.0, long_ma=100.0), thresholds) == Signal.EXIT
        assert rules.bear_spread_signal(make_snapshot(short_ma=100.0, long_ma=100.0), thresholds) == Signal.EXIT

    @pytest.mark.parametrize("volatility,expected", [
        (0.0, Signal.ENTER),
        (0.0049, Signal.ENTER),
        (0.005, Signal.EXIT),
        (0.03, Signal.EXIT),
    ])
    def test_butterfly_spread(self, make_snapshot, volatility, expected):
        thresholds = ThresholdParams()
        assert rules.butterfly_spread_signal(make_snapshot(volatility=volatility), thresholds) == expected

    @pytest.mark.parametrize("volatility", [0.0, 0.003, 0.006, 0.011, 0.05])
    def test_binary_strategies_never_hold(self, make_snapshot, volatility):
        generator = SignalGenerator()
        for short_ma in (99.0, 100.0, 101.0):
            signals = generator.generate(make_snapshot(volatility=volatility, short_ma=short_ma))
            for strategy in (StrategyId.BULL_SPREAD, StrategyId.BEAR_SPREAD,
                             StrategyId.BUTTERFLY_SPREAD):
                assert signals[strategy] != Signal.HOLD


class TestSignalGenerator:
    """Test the full signal set."""

    def test_covers_every_strategy(self, make_snapshot):
        signals = SignalGenerator().generate(make_snapshot())
        assert set(signals) == set(StrategyId)

    def test_high_volatility_uptrend(self, make_snapshot):
        signals = SignalGenerator().generate(
            make_snapshot(volatility=0.02, short_ma=105.0, long_ma=100.0)
        )
        assert signals == {
            StrategyId.STRADDLE: Signal.ENTER,
            StrategyId.STRANGLE: Signal.ENTER,
            StrategyId.BULL_SPREAD: Signal.ENTER,
            StrategyId.BEAR_SPREAD: Signal.EXIT,
            StrategyId.BUTTERFLY_SPREAD: Signal.EXIT,
        }

    def test_quiet_downtrend(self, make_snapshot):
        signals = SignalGenerator().generate(
            make_snapshot(volatility=0.001, short_ma=95.0, long_ma=100.0)
        )
        assert signals == {
            StrategyId.STRADDLE: Signal.EXIT,
            StrategyId.STRANGLE: Signal.EXIT,
            StrategyId.BULL_SPREAD: Signal.EXIT,
            StrategyId.BEAR_SPREAD: Signal.ENTER,
            StrategyId.BUTTERFLY_SPREAD: Signal.ENTER,
        }

    def test_signal_values(self):
        assert int(Signal.ENTER) == 1
        assert int(Signal.EXIT) == -1
        assert int(Signal.HOLD) == 0
