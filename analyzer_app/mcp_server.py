"""
Token Analyzer MCP server.

Exposes one tool, ``analyzeCoinById``, that fetches the CoinGecko market
chart for a coin id (or a 0x contract address on the configured asset
platform) and returns the trading signal and cross analysis as JSON text.

Usage:
    # Run as stdio server
    token-analyzer-mcp

    # Run as HTTP server
    token-analyzer-mcp streamable-http

Environment Variables:
    COINGECKO_API_KEY: Optional demo API key
    LOOKBACK_DAYS: Market chart window (default: 51)
    CONTRACT_PLATFORM: Asset platform for 0x addresses (default: ethereum)
    ANALYSIS_CONFIG_PATH: Optional YAML file with indicator periods
"""

from __future__ import annotations

import argparse
import logging
from contextlib import asynccontextmanager
from typing import Annotated, AsyncIterator

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from analyzer_app.analysis_config import load_analysis_config
from analyzer_app.config import get_settings
from analyzer_app.services import TokenAnalysisService, create_service

# Logs go to stderr; stdout carries the protocol
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = (
    "Analyze coins or tokens using CoinGecko market data and trend "
    "indicators (RSI, EMA, MACD, Bollinger Bands, OBV, golden/death cross)."
)

_service: TokenAnalysisService | None = None


def get_service() -> TokenAnalysisService:
    """Get or create the process-wide analysis service."""
    global _service
    if _service is None:
        settings = get_settings()
        _service = create_service(
            settings, load_analysis_config(settings.analysis_config_path or None)
        )
    return _service


@asynccontextmanager
async def _lifespan(server: FastMCP) -> AsyncIterator[dict]:
    global _service
    try:
        yield {}
    finally:
        if _service is not None:
            await _service.close()
            _service = None


mcp = FastMCP(
    name="Token Analyzer",
    instructions=SERVER_INSTRUCTIONS,
    lifespan=_lifespan,
)


@mcp.tool(name="analyzeCoinById", description="Analyze Coin or Token by ID")
async def analyze_coin_by_id(
    coinId: Annotated[str, Field(description="Coin ID or Contract Address to Analyze")],
) -> str:
    """Analyze a coin or token.

    Args:
        coinId: CoinGecko coin id (e.g. "bitcoin") or 0x contract address
    """
    # Argument name is part of the tool schema
    report = await get_service().analyze_coin(coinId)
    return report.to_json()


def main() -> None:
    parser = argparse.ArgumentParser(description="Token Analyzer MCP server")
    parser.add_argument(
        "transport",
        choices=["stdio", "streamable-http"],
        default="stdio",
        nargs="?",
        help="Transport mode (default: stdio)",
    )
    args = parser.parse_args()

    logger.info(f"Token Analyzer MCP server running on {args.transport}")
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
