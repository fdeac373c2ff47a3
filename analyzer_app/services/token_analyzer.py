"""Token analysis service: fetch market data and run the analysis core."""

import logging

from analyzer_app.clients import CoinGeckoRestClient
from analyzer_app.config import Settings
from analyzer_app.services.market_data import observations_from_market_chart
from analyzer_core.models import AnalysisConfig, AnalysisReport
from analyzer_core.strategy import analyze

logger = logging.getLogger(__name__)

CONTRACT_PREFIX = "0x"


def is_contract_address(identifier: str) -> bool:
    """Check whether an identifier is a token contract address."""
    return identifier.lower().startswith(CONTRACT_PREFIX)


class TokenAnalysisService:
    """Runs one analysis per request; holds only the HTTP client."""

    def __init__(
        self,
        client: CoinGeckoRestClient,
        settings: Settings,
        analysis_config: AnalysisConfig | None = None,
    ):
        self.client = client
        self.settings = settings
        self.analysis_config = analysis_config or AnalysisConfig()

    async def fetch_market_chart(self, coin_id: str) -> dict:
        """Fetch the raw market chart for a coin id or contract address."""
        if is_contract_address(coin_id):
            return await self.client.get_contract_market_chart(
                platform=self.settings.contract_platform,
                contract_address=coin_id,
                vs_currency=self.settings.vs_currency,
                days=self.settings.lookback_days,
                interval=self.settings.chart_interval,
            )
        return await self.client.get_market_chart(
            coin_id,
            vs_currency=self.settings.vs_currency,
            days=self.settings.lookback_days,
            interval=self.settings.chart_interval,
        )

    async def analyze_coin(self, coin_id: str) -> AnalysisReport:
        """
        Analyze a coin or token.

        Args:
            coin_id: CoinGecko coin id or 0x contract address

        Returns:
            AnalysisReport

        Raises:
            ValueError: If coin_id is empty
            InsufficientDataError: If the chart is too short to analyze
            MarketDataError: If the payload is malformed
            httpx.HTTPError: If the upstream request fails
        """
        coin_id = coin_id.strip()
        if not coin_id:
            raise ValueError("coin_id must not be empty")

        payload = await self.fetch_market_chart(coin_id)
        observations = observations_from_market_chart(payload)
        report = analyze(observations, self.analysis_config)

        signal = report.trading_signal
        logger.info(
            f"{coin_id}: {signal.recommendation.value} "
            f"(confidence {signal.confidence:.0f}, {len(observations)} points)"
        )
        return report

    async def close(self) -> None:
        await self.client.close()


def create_service(settings: Settings, analysis_config: AnalysisConfig | None = None) -> TokenAnalysisService:
    """Build a service wired to the configured CoinGecko endpoint."""
    client = CoinGeckoRestClient(
        base_url=settings.coingecko_base_url,
        api_key=settings.coingecko_api_key,
        calls_per_minute=settings.calls_per_minute,
        timeout=settings.request_timeout,
    )
    return TokenAnalysisService(client, settings, analysis_config)
