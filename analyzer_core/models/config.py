"""Analysis configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AnalysisConfig(BaseModel):
    """Indicator parameters used by one analysis run."""

    model_config = ConfigDict(frozen=True)

    # Momentum
    rsi_period: int = Field(default=14, ge=1)

    # Trend (price vs EMA rule)
    trend_ema_period: int = Field(default=50, ge=1)

    # MACD
    macd_short_period: int = Field(default=12, ge=1)
    macd_long_period: int = Field(default=26, ge=1)
    macd_signal_period: int = Field(default=9, ge=1)

    # Volatility
    bollinger_period: int = Field(default=20, ge=1)
    bollinger_multiplier: float = Field(default=2.0, gt=0)

    # Golden/death cross legs
    cross_short_period: int = Field(default=50, ge=1)
    cross_long_period: int = Field(default=200, ge=1)

    @model_validator(mode="after")
    def _validate(self):
        if self.macd_short_period >= self.macd_long_period:
            raise ValueError(
                "macd_short_period must be smaller than macd_long_period, "
                f"got {self.macd_short_period} >= {self.macd_long_period}"
            )
        if self.cross_short_period >= self.cross_long_period:
            raise ValueError(
                "cross_short_period must be smaller than cross_long_period, "
                f"got {self.cross_short_period} >= {self.cross_long_period}"
            )
        return self

    @property
    def min_observations(self) -> int:
        """Shortest series for which every rule has a latest value.

        The crossover legs are not included: cross detection degrades to
        "no cross" on short series instead of failing.
        """
        return max(
            self.rsi_period,
            self.trend_ema_period,
            self.macd_long_period + self.macd_signal_period - 1,
            2,  # OBV slope needs two points
        )
