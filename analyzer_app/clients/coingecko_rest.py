"""CoinGecko REST API client for fetching market charts."""

import asyncio
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class RateLimiter:
    """Simple rate limiter for API calls."""

    def __init__(self, calls_per_minute: int = 30):
        self.calls_per_minute = calls_per_minute
        self.interval = 60.0 / calls_per_minute
        self.last_call = 0.0
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        """Wait if necessary to respect rate limit."""
        async with self._lock:
            loop = asyncio.get_running_loop()
            wait_time = self.last_call + self.interval - loop.time()
            if wait_time > 0:
                await asyncio.sleep(wait_time)
            self.last_call = loop.time()


class CoinGeckoRestClient:
    """CoinGecko public API client."""

    BASE_URL = "https://api.coingecko.com/api/v3"

    def __init__(
        self,
        base_url: str = BASE_URL,
        api_key: str = "",
        calls_per_minute: int = 30,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self.rate_limiter = RateLimiter(calls_per_minute)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            if self.api_key:
                headers["x-cg-demo-api-key"] = self.api_key
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(
        self, method: str, endpoint: str, params: dict[str, Any] | None = None
    ) -> Any:
        """Make an API request with rate limiting."""
        await self.rate_limiter.acquire()
        client = await self._get_client()
        try:
            response = await client.request(method, endpoint, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Error fetching data from CoinGecko {endpoint}: {e}")
            raise
        return response.json()

    async def get_market_chart(
        self,
        coin_id: str,
        vs_currency: str = "usd",
        days: int = 51,
        interval: str | None = "daily",
    ) -> dict[str, Any]:
        """
        Fetch historical market chart for a coin.

        Args:
            coin_id: CoinGecko coin id (e.g., "bitcoin")
            vs_currency: Quote currency
            days: Lookback window in days
            interval: Data interval ("daily"), or None for automatic granularity

        Returns:
            Raw payload with "prices", "market_caps" and "total_volumes"
            arrays of [timestamp_ms, value] pairs
        """
        params: dict[str, Any] = {"vs_currency": vs_currency, "days": days}
        if interval:
            params["interval"] = interval
        return await self._request("GET", f"/coins/{coin_id}/market_chart", params)

    async def get_contract_market_chart(
        self,
        platform: str,
        contract_address: str,
        vs_currency: str = "usd",
        days: int = 51,
        interval: str | None = "daily",
    ) -> dict[str, Any]:
        """
        Fetch historical market chart for a token contract.

        Args:
            platform: Asset platform id (e.g., "ethereum")
            contract_address: Token contract address
            vs_currency: Quote currency
            days: Lookback window in days
            interval: Data interval ("daily"), or None for automatic granularity

        Returns:
            Raw payload in the same shape as get_market_chart
        """
        params: dict[str, Any] = {"vs_currency": vs_currency, "days": days}
        if interval:
            params["interval"] = interval
        return await self._request(
            "GET",
            f"/coins/{platform}/contract/{contract_address}/market_chart",
            params,
        )
