"""Immutable analysis context holding every derived indicator series.

An AnalysisContext is built once per analysis call from a batch of
observations. The synthesizer and the cross-analysis view both read from
it, so no indicator is computed twice.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from analyzer_core.indicators import bollinger_bands, ema, macd, obv, rsi
from analyzer_core.models import (
    AnalysisConfig,
    CrossSignals,
    Observation,
    get_prices,
    get_volumes,
    normalize_series,
)
from analyzer_core.strategy.crossover import crosses_from_legs

logger = logging.getLogger(__name__)


class InsufficientDataError(ValueError):
    """Raised when a series is too short for the configured indicators."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"Insufficient data: {available} observations, at least {required} required"
        )


@dataclass(frozen=True, slots=True)
class IndicatorSnapshot:
    """Latest value of every indicator the rule table reads."""

    price: float
    rsi: float
    ema: float
    macd: float
    macd_signal: float
    upper_band: float
    lower_band: float
    obv_slope: float
    golden_cross: bool = False
    death_cross: bool = False
    ema_period: int = 50


@dataclass(frozen=True, slots=True)
class AnalysisContext:
    """Normalized series plus all derived indicator series."""

    config: AnalysisConfig
    observations: tuple[Observation, ...]
    prices: tuple[float, ...]
    volumes: tuple[float, ...]
    rsi: tuple[float, ...]
    trend_ema: tuple[float, ...]
    macd_line: tuple[float, ...]
    signal_line: tuple[float, ...]
    bollinger_middle: tuple[float, ...]
    bollinger_upper: tuple[float, ...]
    bollinger_lower: tuple[float, ...]
    obv: tuple[float, ...]
    cross_short_ema: tuple[float, ...]
    cross_long_ema: tuple[float, ...]

    @property
    def crosses(self) -> CrossSignals:
        return crosses_from_legs(self.cross_short_ema, self.cross_long_ema)

    def latest(self) -> IndicatorSnapshot:
        """Get the latest value of each indicator."""
        crosses = self.crosses
        return IndicatorSnapshot(
            price=self.prices[-1],
            rsi=self.rsi[-1],
            ema=self.trend_ema[-1],
            macd=self.macd_line[-1],
            macd_signal=self.signal_line[-1],
            upper_band=self.bollinger_upper[-1],
            lower_band=self.bollinger_lower[-1],
            obv_slope=self.obv[-1] - self.obv[-2],
            golden_cross=crosses.golden_cross,
            death_cross=crosses.death_cross,
            ema_period=self.config.trend_ema_period,
        )


def build_context(
    observations: Iterable[Observation],
    config: AnalysisConfig | None = None,
) -> AnalysisContext:
    """Normalize observations and compute every indicator.

    Args:
        observations: Observations in any order
        config: Indicator parameters (defaults if None)

    Returns:
        AnalysisContext for the sorted series

    Raises:
        InsufficientDataError: If the series is shorter than
            config.min_observations
    """
    config = config or AnalysisConfig()
    series = normalize_series(observations)

    if len(series) < config.min_observations:
        logger.warning(
            f"Cannot analyze {len(series)} observations "
            f"(need {config.min_observations})"
        )
        raise InsufficientDataError(len(series), config.min_observations)

    prices = get_prices(series)
    volumes = get_volumes(series)

    macd_result = macd(
        prices,
        config.macd_short_period,
        config.macd_long_period,
        config.macd_signal_period,
    )
    bands = bollinger_bands(prices, config.bollinger_period, config.bollinger_multiplier)

    context = AnalysisContext(
        config=config,
        observations=tuple(series),
        prices=tuple(prices),
        volumes=tuple(volumes),
        rsi=tuple(rsi(prices, config.rsi_period)),
        trend_ema=tuple(ema(prices, config.trend_ema_period)),
        macd_line=tuple(macd_result.macd_line),
        signal_line=tuple(macd_result.signal_line),
        bollinger_middle=tuple(bands.middle),
        bollinger_upper=tuple(bands.upper),
        bollinger_lower=tuple(bands.lower),
        obv=tuple(obv(prices, volumes)),
        cross_short_ema=tuple(ema(prices, config.cross_short_period)),
        cross_long_ema=tuple(ema(prices, config.cross_long_period)),
    )
    logger.debug(
        f"Built analysis context: {len(series)} observations, "
        f"cross legs {len(context.cross_short_ema)}/{len(context.cross_long_ema)}"
    )
    return context
