"""Indicator configuration loaded from analysis.yaml.

Example:

    rsi_period: 14
    trend_ema_period: 50
    cross_short_period: 20
    cross_long_period: 50

Keys not present keep their defaults. No file means all defaults.
"""

import logging
from pathlib import Path

import yaml

from analyzer_core.models import AnalysisConfig

logger = logging.getLogger(__name__)

_DEFAULT_PATH = Path(__file__).parent.parent / "analysis.yaml"


def load_analysis_config(path: Path | str | None = None) -> AnalysisConfig:
    """Load indicator parameters from a YAML file.

    Falls back to defaults if the file doesn't exist.

    Raises:
        ValueError: If the file is not a mapping or a value is invalid
    """
    config_path = Path(path) if path else _DEFAULT_PATH

    if not config_path.exists():
        logger.info(
            "No analysis config found at %s, using defaults",
            config_path,
        )
        return AnalysisConfig()

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(
            f"{config_path} must contain a mapping, got {type(raw).__name__}"
        )

    config = AnalysisConfig(**raw)
    logger.info(
        "Loaded analysis config: rsi=%d trend=%d macd=%d/%d/%d bb=%d crosses=%d/%d",
        config.rsi_period,
        config.trend_ema_period,
        config.macd_short_period,
        config.macd_long_period,
        config.macd_signal_period,
        config.bollinger_period,
        config.cross_short_period,
        config.cross_long_period,
    )
    return config
