"""Application services."""

from analyzer_app.services.market_data import (
    MarketDataError,
    observations_from_market_chart,
)
from analyzer_app.services.token_analyzer import (
    TokenAnalysisService,
    create_service,
    is_contract_address,
)

__all__ = [
    "MarketDataError",
    "observations_from_market_chart",
    "TokenAnalysisService",
    "create_service",
    "is_contract_address",
]
