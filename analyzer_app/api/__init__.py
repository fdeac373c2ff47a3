"""API endpoints."""

from analyzer_app.api.routes import router, get_analysis_service

__all__ = ["router", "get_analysis_service"]
