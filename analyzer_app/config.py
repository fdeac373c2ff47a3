"""Application configuration."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # CoinGecko API
    coingecko_base_url: str = "https://api.coingecko.com/api/v3"
    coingecko_api_key: str = ""  # Optional demo API key
    calls_per_minute: int = Field(default=30, gt=0)  # Public API limit
    request_timeout: float = Field(default=30.0, gt=0)

    # Market chart request
    vs_currency: str = "usd"
    lookback_days: int = Field(default=51, gt=0)
    chart_interval: str = "daily"
    contract_platform: str = "ethereum"  # Asset platform for 0x addresses

    # Indicator overrides (YAML, optional)
    analysis_config_path: str = ""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
