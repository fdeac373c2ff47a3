"""Tests for the signal rule table."""

import itertools
from dataclasses import replace

import pytest

from analyzer_core.models import Recommendation
from analyzer_core.strategy import (
    IndicatorSnapshot,
    normalize_confidence,
    recommend,
    synthesize_signal,
)


def _snapshot(
    rsi: float = 50.0,
    trend: str = "up",
    momentum: str = "up",
    band: str = "inside",
    obv_slope: float = 1.0,
    golden_cross: bool = False,
    death_cross: bool = False,
) -> IndicatorSnapshot:
    """Snapshot at price 100 with each rule steered by name."""
    price = 100.0
    return IndicatorSnapshot(
        price=price,
        rsi=rsi,
        ema=90.0 if trend == "up" else 110.0,
        macd=2.0 if momentum == "up" else 1.0,
        macd_signal=1.0 if momentum == "up" else 2.0,
        upper_band={"inside": 110.0, "lower": 120.0, "upper": 100.0}[band],
        lower_band={"inside": 90.0, "lower": 100.0, "upper": 80.0}[band],
        obv_slope=obv_slope,
        golden_cross=golden_cross,
        death_cross=death_cross,
    )


class TestRuleTable:
    """Tests for individual rules and their order."""

    def test_all_bullish_with_golden_cross(self):
        signal = synthesize_signal(
            _snapshot(rsi=25.0, band="lower", obv_slope=5.0, golden_cross=True)
        )

        # 20 + 15 + 25 + 20 + 20 + 30 = 130, clamped to 100
        assert signal.recommendation == Recommendation.BUY
        assert signal.confidence == 100.0
        assert signal.reasons == [
            "RSI indicates oversold condition",
            "Price is above EMA50, bullish trend",
            "MACD shows bullish momentum",
            "Price near lower Bollinger Band, potential buy signal",
            "Positive On-Balance Volume trend",
            "Golden Cross detected: Short-term EMA crossing above long-term EMA",
        ]
        assert signal.cross_signals.golden_cross is True
        assert signal.cross_signals.death_cross is False

    def test_all_bearish_with_death_cross(self):
        signal = synthesize_signal(
            _snapshot(
                rsi=80.0,
                trend="down",
                momentum="down",
                band="upper",
                obv_slope=-5.0,
                death_cross=True,
            )
        )

        assert signal.recommendation == Recommendation.SELL
        assert signal.confidence == 100.0
        assert signal.reasons == [
            "RSI indicates overbought condition",
            "Price is below EMA50, bearish trend",
            "MACD shows bearish momentum",
            "Price near upper Bollinger Band, potential sell signal",
            "Negative On-Balance Volume trend",
            "Death Cross detected: Short-term EMA crossing below long-term EMA",
        ]

    def test_steady_conditions(self):
        signal = synthesize_signal(_snapshot(momentum="down"))

        # 0 + 15 - 25 + 0 + 20 = 10
        assert signal.recommendation == Recommendation.HOLD
        assert signal.confidence == 10.0
        assert signal.reasons[0] == "RSI indicates steady condition"
        assert signal.reasons[3] == "Bollinger Band indicates steady condition"
        assert len(signal.reasons) == 5

    def test_rsi_boundaries_are_steady(self):
        for value in (30.0, 70.0):
            signal = synthesize_signal(_snapshot(rsi=value))
            assert signal.reasons[0] == "RSI indicates steady condition"

    def test_price_equal_to_ema_is_bearish(self):
        snapshot = _snapshot()
        signal = synthesize_signal(
            replace(snapshot, ema=snapshot.price)
        )
        assert signal.reasons[1] == "Price is below EMA50, bearish trend"

    def test_trend_reason_names_configured_period(self):
        snapshot = _snapshot()

        bullish = synthesize_signal(replace(snapshot, ema_period=20))
        bearish = synthesize_signal(replace(snapshot, ema=110.0, ema_period=20))

        assert bullish.reasons[1] == "Price is above EMA20, bullish trend"
        assert bearish.reasons[1] == "Price is below EMA20, bearish trend"

    def test_macd_equal_to_signal_is_bearish(self):
        snapshot = _snapshot()
        signal = synthesize_signal(
            replace(snapshot, macd=1.0, macd_signal=1.0)
        )
        assert signal.reasons[2] == "MACD shows bearish momentum"

    def test_flat_obv_is_negative(self):
        signal = synthesize_signal(_snapshot(obv_slope=0.0))
        assert signal.reasons[4] == "Negative On-Balance Volume trend"

    def test_current_price_is_reported(self):
        assert synthesize_signal(_snapshot()).current_price == 100.0


class TestThresholds:
    """Tests for recommendation thresholds and confidence clamping."""

    def test_score_of_exactly_30_holds(self):
        # 20 + 15 - 25 + 0 + 20 = 30
        signal = synthesize_signal(_snapshot(rsi=20.0, momentum="down"))

        assert signal.recommendation == Recommendation.HOLD
        assert signal.confidence == 30.0

    def test_score_of_exactly_minus_30_holds(self):
        # -20 - 15 + 25 + 0 - 20 = -30
        signal = synthesize_signal(_snapshot(rsi=80.0, trend="down", obv_slope=-1.0))

        assert signal.recommendation == Recommendation.HOLD
        assert signal.confidence == 30.0

    def test_golden_cross_without_crossing_threshold(self):
        # 0 - 15 - 25 + 0 - 20 + 30 = -30
        signal = synthesize_signal(
            _snapshot(trend="down", momentum="down", obv_slope=-1.0, golden_cross=True)
        )

        assert signal.recommendation == Recommendation.HOLD
        assert signal.cross_signals.golden_cross is True
        assert signal.reasons[-1].startswith("Golden Cross detected")

    @pytest.mark.parametrize(
        "score,expected",
        [
            (31, Recommendation.BUY),
            (30, Recommendation.HOLD),
            (0, Recommendation.HOLD),
            (-30, Recommendation.HOLD),
            (-31, Recommendation.SELL),
        ],
    )
    def test_recommend(self, score, expected):
        assert recommend(score) == expected

    @pytest.mark.parametrize(
        "score,expected",
        [(130, 100.0), (-130, 100.0), (-45, 45.0), (0, 0.0), (100, 100.0)],
    )
    def test_normalize_confidence(self, score, expected):
        assert normalize_confidence(score) == expected

    def test_confidence_always_within_bounds(self):
        options = itertools.product(
            (20.0, 50.0, 80.0),
            ("up", "down"),
            ("up", "down"),
            ("inside", "lower", "upper"),
            (1.0, -1.0),
            ((False, False), (True, False), (False, True)),
        )
        for rsi, trend, momentum, band, slope, (golden, death) in options:
            signal = synthesize_signal(
                _snapshot(rsi, trend, momentum, band, slope, golden, death)
            )
            assert 0.0 <= signal.confidence <= 100.0
            if signal.recommendation == Recommendation.HOLD:
                assert signal.confidence <= 30.0
            else:
                assert signal.confidence > 30.0