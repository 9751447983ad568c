from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logger import get_logger

logger = get_logger("config")


class Settings(BaseSettings):
    """Service settings, read from RECIPES_* environment variables or .env."""

    app_name: str = "Recipes API"
    debug: bool = False

    database_url: str = Field(default="sqlite:///./recipes.db")

    log_level: str = "INFO"
    log_json_format: bool = False

    # adjust origins for production
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_prefix="RECIPES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    settings = Settings()
    logger.debug("Settings loaded: app=%s debug=%s", settings.app_name, settings.debug)
    return settings
