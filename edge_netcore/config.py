# edge_netcore/config.py
"""
Library Configuration
Uses pydantic-settings for environment variable management
"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    Settings loaded from NETCORE_* environment variables
    A .env file is honoured for local development
    """

    # === Application ===
    APP_NAME: str = "Edge Network Core"
    APP_VERSION: str = "1.0.0"

    # === Logging ===
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # === Port reporting ===
    # Always reported in info and metrics ahead of the device ports
    REPORT_PORTS_EXTRA: List[str] = ["dbo1x0"]

    # === Adapter resolution ===
    # When True an adapter name matching no port raises instead of passing through
    STRICT_ADAPTER_RESOLUTION: bool = False

    model_config = SettingsConfigDict(
        env_prefix="NETCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance
    Use this to get settings throughout the library
    """
    return Settings()


settings = get_settings()
