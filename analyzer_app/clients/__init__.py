"""Market data clients."""

from analyzer_app.clients.coingecko_rest import CoinGeckoRestClient, RateLimiter

__all__ = [
    "CoinGeckoRestClient",
    "RateLimiter",
]
