from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_prefix="FLOWTAG_", env_file=".env", extra="ignore")

    # Dispatcher settings
    max_workers: Optional[int] = Field(
        None, ge=1, description="Worker threads; defaults to the CPU count"
    )
    dispatch_timeout: float = Field(
        60.0, gt=0, description="Seconds to wait for workers after the last line is submitted"
    )

    # Logging settings
    log_level: str = Field("INFO", description="Level applied to flowtag loggers")


@lru_cache()
def get_settings() -> Settings:
    """Return a singleton settings instance."""
    return Settings()


settings = get_settings()
