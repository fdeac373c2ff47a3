"""Shared fixtures."""

import pytest

DAY_MS = 86_400_000
START_MS = 1_700_000_000_000


def make_market_chart(prices: list[float], volume: float = 1000.0) -> dict:
    """Market chart payload in CoinGecko's [timestamp_ms, value] format."""
    timestamps = [START_MS + i * DAY_MS for i in range(len(prices))]
    return {
        "prices": [[t, p] for t, p in zip(timestamps, prices)],
        "market_caps": [[t, p * 1e6] for t, p in zip(timestamps, prices)],
        "total_volumes": [[t, volume] for t in timestamps],
    }


@pytest.fixture
def rising_chart() -> dict:
    """Sixty daily points of a compounding 1% rise."""
    return make_market_chart([100.0 * 1.01**i for i in range(60)])
