"""Golden/death cross detection on a pair of EMAs.

- Golden cross: short EMA was at or below the long EMA one step back and
  is above it now
- Death cross: short EMA was at or above the long EMA one step back and
  is below it now

Only the last two points of each leg are compared. Legs with fewer than
two points report no cross. This module is pure business logic with no
I/O dependencies.
"""

from typing import Sequence

from analyzer_core.indicators import ema
from analyzer_core.models import CrossAnalysis, CrossSignals, EmaPair

DEFAULT_SHORT_PERIOD = 50
DEFAULT_LONG_PERIOD = 200


def crosses_from_legs(
    short_ema: Sequence[float],
    long_ema: Sequence[float],
) -> CrossSignals:
    """Detect a cross from precomputed EMA legs.

    Args:
        short_ema: Short-period EMA series
        long_ema: Long-period EMA series

    Returns:
        CrossSignals with both flags False if either leg has < 2 points
    """
    if len(short_ema) < 2 or len(long_ema) < 2:
        return CrossSignals(golden_cross=False, death_cross=False)

    prev_short, curr_short = short_ema[-2], short_ema[-1]
    prev_long, curr_long = long_ema[-2], long_ema[-1]

    # Bullish: short was below (or touching) long, now above
    golden = prev_short <= prev_long and curr_short > curr_long
    # Bearish: short was above (or touching) long, now below
    death = prev_short >= prev_long and curr_short < curr_long

    return CrossSignals(golden_cross=golden, death_cross=death)


def detect_crosses(
    prices: Sequence[float],
    short_period: int = DEFAULT_SHORT_PERIOD,
    long_period: int = DEFAULT_LONG_PERIOD,
) -> CrossSignals:
    """Detect golden/death cross on the latest bar of a price series."""
    return crosses_from_legs(ema(prices, short_period), ema(prices, long_period))


def _last_two(values: Sequence[float]) -> EmaPair:
    return EmaPair(
        current=values[-1] if len(values) >= 1 else None,
        previous=values[-2] if len(values) >= 2 else None,
    )


def cross_analysis_from_legs(
    short_ema: Sequence[float],
    long_ema: Sequence[float],
) -> CrossAnalysis:
    """Build the diagnostic cross view from precomputed EMA legs."""
    signals = crosses_from_legs(short_ema, long_ema)
    return CrossAnalysis(
        golden_cross=signals.golden_cross,
        death_cross=signals.death_cross,
        short_term_ema=_last_two(short_ema),
        long_term_ema=_last_two(long_ema),
    )


def analyze_crosses(
    prices: Sequence[float],
    short_period: int = DEFAULT_SHORT_PERIOD,
    long_period: int = DEFAULT_LONG_PERIOD,
) -> CrossAnalysis:
    """Return the two most recent values of both EMA legs plus the flags.

    Used for diagnostic reporting only; the recommendation does not read it.
    """
    return cross_analysis_from_legs(ema(prices, short_period), ema(prices, long_period))
