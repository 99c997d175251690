"""Service settings loaded from environment variables."""

import logging
import os
from functools import lru_cache
from pydantic import BaseModel


DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class Settings(BaseModel):
    """Settings for the review API."""

    app_name: str = "SuperMemo2 Review API"
    log_level: str = "INFO"
    cors_origins: list[str] = []

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, falling back to INFO for unknown names."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings from environment variables."""
    return Settings(
        app_name=os.getenv("APP_NAME", "SuperMemo2 Review API"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
    )
