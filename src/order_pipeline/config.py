"""Pipeline configuration via environment variables.

Settings are read from ORDER_PIPELINE_* environment variables and,
when present, a .env file in the working directory.

Environment Variables:
    ORDER_PIPELINE_TAX_RATE: Tax rate as a decimal fraction (default 0.0825)
    ORDER_PIPELINE_GATEWAY_REJECT_SUFFIX: Order id suffix the stand-in
        gateway rejects (default "X")
    ORDER_PIPELINE_ORDER_SOURCE_LATENCY_SECONDS: Simulated fetch delay
        for the in-memory order source (default 0.05)
    ORDER_PIPELINE_LOG_LEVEL: Logging level (default INFO)
    ORDER_PIPELINE_LOG_JSON: Emit JSON log lines (default False)
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Order pipeline settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ORDER_PIPELINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Tax
    TAX_RATE: Decimal = Field(default=Decimal("0.0825"), ge=0)

    # Gateway
    GATEWAY_REJECT_SUFFIX: str = Field(default="X", min_length=1)

    # Order source
    ORDER_SOURCE_LATENCY_SECONDS: float = Field(default=0.05, ge=0)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
