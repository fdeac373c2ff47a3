"""REST API routes."""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from analyzer_app.config import get_settings
from analyzer_app.services import MarketDataError, TokenAnalysisService
from analyzer_core.strategy import InsufficientDataError

logger = logging.getLogger(__name__)

router = APIRouter()


class SystemStatus(BaseModel):
    """System status response."""

    status: str
    version: str
    vs_currency: str
    lookback_days: int
    min_observations: int


def get_analysis_service(request: Request) -> TokenAnalysisService:
    """Service created in the application lifespan."""
    return request.app.state.analysis_service


@router.get("/status", response_model=SystemStatus)
async def get_status(service: TokenAnalysisService = Depends(get_analysis_service)):
    """Get system status."""
    settings = get_settings()
    return SystemStatus(
        status="running",
        version="0.1.0",
        vs_currency=settings.vs_currency,
        lookback_days=settings.lookback_days,
        min_observations=service.analysis_config.min_observations,
    )


@router.get("/analyze/{coin_id}")
async def analyze_coin(
    coin_id: str,
    service: TokenAnalysisService = Depends(get_analysis_service),
):
    """Analyze a coin id or 0x contract address."""
    try:
        report = await service.analyze_coin(coin_id)
    except InsufficientDataError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (MarketDataError, httpx.HTTPError) as e:
        logger.error(f"Upstream failure analyzing {coin_id}: {e}")
        raise HTTPException(status_code=502, detail=f"Market data unavailable: {e}")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return report.model_dump(mode="json", by_alias=True)
