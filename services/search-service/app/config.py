"""
Configuration module for catalog search.

All settings can be overridden via environment variables or a .env file.
Scoring weights and the abbreviation table are fixed and not configurable.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Catalog search configuration.

    Attributes:
        SERVICE_NAME: Name used to identify log output
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render logs as JSON instead of console output
        RANK_MAX_RESULTS: Default number of ranked results returned
        RANK_MIN_SCORE: Default minimum relevance score for ranked results
    """

    SERVICE_NAME: str = Field(default="catalog-search")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    LOG_JSON: bool = Field(default=False)

    # Ranking defaults
    RANK_MAX_RESULTS: int = Field(default=50, ge=1)
    RANK_MIN_SCORE: float = Field(default=0.0, ge=0.0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
