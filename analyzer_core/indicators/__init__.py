"""Technical indicators (pure math, no I/O)."""

from analyzer_core.indicators.indicators import (
    sma,
    ema,
    smoothed_moving_average,
    rsi,
    macd,
    bollinger_bands,
    obv,
    MacdResult,
    BollingerBands,
)

__all__ = [
    "sma",
    "ema",
    "smoothed_moving_average",
    "rsi",
    "macd",
    "bollinger_bands",
    "obv",
    "MacdResult",
    "BollingerBands",
]
