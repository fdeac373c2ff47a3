"""Result assembly: observations in, AnalysisReport out."""

import logging
from typing import Iterable

from analyzer_core.models import (
    AnalysisConfig,
    AnalysisReport,
    CrossAnalysis,
    Observation,
    TradingSignal,
)
from analyzer_core.strategy.context import AnalysisContext, build_context
from analyzer_core.strategy.crossover import cross_analysis_from_legs
from analyzer_core.strategy.synthesizer import synthesize_signal

logger = logging.getLogger(__name__)


def generate_trading_signal(context: AnalysisContext) -> TradingSignal:
    """Run the rule table on the latest values of a context."""
    return synthesize_signal(context.latest())


def get_cross_analysis(context: AnalysisContext) -> CrossAnalysis:
    """Diagnostic cross view for a context."""
    return cross_analysis_from_legs(context.cross_short_ema, context.cross_long_ema)


def analyze(
    observations: Iterable[Observation],
    config: AnalysisConfig | None = None,
) -> AnalysisReport:
    """Compute the trading signal and cross analysis for a batch.

    Args:
        observations: Observations in any order
        config: Indicator parameters (defaults if None)

    Returns:
        AnalysisReport

    Raises:
        InsufficientDataError: If the series is too short
    """
    context = build_context(observations, config)
    signal = generate_trading_signal(context)

    logger.debug(
        f"Signal {signal.recommendation.value} confidence={signal.confidence} "
        f"price={signal.current_price}"
    )

    return AnalysisReport(
        trading_signal=signal,
        cross_analysis=get_cross_analysis(context),
    )
