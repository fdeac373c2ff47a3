"""Data models."""

from analyzer_core.models.observation import (
    Observation,
    get_prices,
    get_volumes,
    normalize_series,
)
from analyzer_core.models.signal import (
    AnalysisReport,
    CrossAnalysis,
    CrossSignals,
    EmaPair,
    Recommendation,
    TradingSignal,
)
from analyzer_core.models.config import AnalysisConfig

__all__ = [
    "Observation",
    "get_prices",
    "get_volumes",
    "normalize_series",
    "AnalysisReport",
    "CrossAnalysis",
    "CrossSignals",
    "EmaPair",
    "Recommendation",
    "TradingSignal",
    "AnalysisConfig",
]
