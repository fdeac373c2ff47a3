"""Trading signal and analysis report models.

All models serialize with camelCase field names (``currentPrice``,
``crossSignals``, ...) so the JSON output matches what tool clients
consume. Python code reads and writes the snake_case attributes.
"""

from enum import Enum

import orjson
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Recommendation(str, Enum):
    """Discrete trading recommendation."""

    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class _OutputModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CrossSignals(_OutputModel):
    """Golden/death cross flags."""

    golden_cross: bool = False
    death_cross: bool = False


class TradingSignal(_OutputModel):
    """Final recommendation for one analysis call.

    ``confidence`` is a magnitude in [0, 100]; the direction is carried
    only by ``recommendation``.
    """

    current_price: float
    recommendation: Recommendation
    confidence: float = Field(ge=0, le=100)
    reasons: list[str] = Field(default_factory=list)
    cross_signals: CrossSignals = Field(default_factory=CrossSignals)


class EmaPair(_OutputModel):
    """The two most recent values of an EMA leg (None if unavailable)."""

    current: float | None = None
    previous: float | None = None


class CrossAnalysis(_OutputModel):
    """Diagnostic view of the crossover EMA legs."""

    golden_cross: bool = False
    death_cross: bool = False
    short_term_ema: EmaPair = Field(default_factory=EmaPair, alias="shortTermEMA")
    long_term_ema: EmaPair = Field(default_factory=EmaPair, alias="longTermEMA")


class AnalysisReport(_OutputModel):
    """Trading signal plus the cross analysis, as returned to callers."""

    trading_signal: TradingSignal
    cross_analysis: CrossAnalysis

    def to_json(self) -> str:
        """Serialize to indented JSON with camelCase keys."""
        payload = self.model_dump(mode="json", by_alias=True)
        return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")
