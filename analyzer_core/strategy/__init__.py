"""Signal strategy: context building, rule table, and result assembly."""

from analyzer_core.strategy.analyzer import (
    analyze,
    generate_trading_signal,
    get_cross_analysis,
)
from analyzer_core.strategy.context import (
    AnalysisContext,
    IndicatorSnapshot,
    InsufficientDataError,
    build_context,
)
from analyzer_core.strategy.crossover import (
    analyze_crosses,
    crosses_from_legs,
    detect_crosses,
)
from analyzer_core.strategy.synthesizer import (
    normalize_confidence,
    recommend,
    synthesize_signal,
)

__all__ = [
    "analyze",
    "generate_trading_signal",
    "get_cross_analysis",
    "AnalysisContext",
    "IndicatorSnapshot",
    "InsufficientDataError",
    "build_context",
    "analyze_crosses",
    "crosses_from_legs",
    "detect_crosses",
    "normalize_confidence",
    "recommend",
    "synthesize_signal",
]
