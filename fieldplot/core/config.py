"""
Library configuration.

Centralized configuration management with environment variables
(prefix ``FIELDPLOT_``) and an optional ``.env`` file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="FIELDPLOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Board defaults (pixels)
    BOARD_WIDTH: int = Field(default=500, gt=0)
    BOARD_HEIGHT: int = Field(default=500, gt=0)

    # Upper bound on sampled grid points per vector field; None = unlimited
    MAX_GRID_POINTS: Optional[int] = Field(default=None, gt=0)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
