"""Rule table that fuses the latest indicator values into one signal.

Rules are evaluated in a fixed order (RSI, trend, momentum, volatility,
volume, crossovers). Each rule appends one reason and adds a signed delta
to the running score. The recommendation is decided on the raw score;
the reported confidence is the magnitude of the score clamped to 100.
"""

from analyzer_core.models import CrossSignals, Recommendation, TradingSignal
from analyzer_core.strategy.context import IndicatorSnapshot

# RSI thresholds
RSI_OVERSOLD = 30
RSI_OVERBOUGHT = 70

# Score deltas
RSI_WEIGHT = 20
TREND_WEIGHT = 15
MOMENTUM_WEIGHT = 25
BOLLINGER_WEIGHT = 20
VOLUME_WEIGHT = 20
CROSS_WEIGHT = 30

# Recommendation thresholds (exclusive)
BUY_THRESHOLD = 30
SELL_THRESHOLD = -30

MAX_CONFIDENCE = 100


def recommend(score: int) -> Recommendation:
    """Map a signed score to a recommendation."""
    if score > BUY_THRESHOLD:
        return Recommendation.BUY
    if score < SELL_THRESHOLD:
        return Recommendation.SELL
    return Recommendation.HOLD


def normalize_confidence(score: int) -> float:
    """Clamp score to [-100, 100] and drop the sign."""
    return float(abs(min(max(score, -MAX_CONFIDENCE), MAX_CONFIDENCE)))


def synthesize_signal(snapshot: IndicatorSnapshot) -> TradingSignal:
    """Apply the rule table to the latest indicator values.

    Args:
        snapshot: Latest indicator values

    Returns:
        TradingSignal with reasons in rule order
    """
    reasons: list[str] = []
    score = 0

    # RSI
    if snapshot.rsi < RSI_OVERSOLD:
        reasons.append("RSI indicates oversold condition")
        score += RSI_WEIGHT
    elif snapshot.rsi > RSI_OVERBOUGHT:
        reasons.append("RSI indicates overbought condition")
        score -= RSI_WEIGHT
    else:
        reasons.append("RSI indicates steady condition")

    # EMA trend
    if snapshot.price > snapshot.ema:
        reasons.append(f"Price is above EMA{snapshot.ema_period}, bullish trend")
        score += TREND_WEIGHT
    else:
        reasons.append(f"Price is below EMA{snapshot.ema_period}, bearish trend")
        score -= TREND_WEIGHT

    # MACD momentum
    if snapshot.macd > snapshot.macd_signal:
        reasons.append("MACD shows bullish momentum")
        score += MOMENTUM_WEIGHT
    else:
        reasons.append("MACD shows bearish momentum")
        score -= MOMENTUM_WEIGHT

    # Bollinger Bands
    if snapshot.price <= snapshot.lower_band:
        reasons.append("Price near lower Bollinger Band, potential buy signal")
        score += BOLLINGER_WEIGHT
    elif snapshot.price >= snapshot.upper_band:
        reasons.append("Price near upper Bollinger Band, potential sell signal")
        score -= BOLLINGER_WEIGHT
    else:
        reasons.append("Bollinger Band indicates steady condition")

    # OBV
    if snapshot.obv_slope > 0:
        reasons.append("Positive On-Balance Volume trend")
        score += VOLUME_WEIGHT
    else:
        reasons.append("Negative On-Balance Volume trend")
        score -= VOLUME_WEIGHT

    # Crossovers
    if snapshot.golden_cross:
        reasons.append("Golden Cross detected: Short-term EMA crossing above long-term EMA")
        score += CROSS_WEIGHT
    if snapshot.death_cross:
        reasons.append("Death Cross detected: Short-term EMA crossing below long-term EMA")
        score -= CROSS_WEIGHT

    return TradingSignal(
        current_price=snapshot.price,
        recommendation=recommend(score),
        confidence=normalize_confidence(score),
        reasons=reasons,
        cross_signals=CrossSignals(
            golden_cross=snapshot.golden_cross,
            death_cross=snapshot.death_cross,
        ),
    )
