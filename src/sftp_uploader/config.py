"""Configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Uploader settings loaded from environment variables.

    Defaults point at a local development SFTP server.

    Environment Variables:
        SFTP_HOST: SFTP server hostname (default 127.0.0.1)
        SFTP_PORT: SFTP server port (default 22)
        SFTP_USERNAME: Username for password authentication
        SFTP_PASSWORD: Password for password authentication
        SFTP_TIMEOUT: TCP connect timeout in seconds (default unset, no timeout)
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # SFTP server
    SFTP_HOST: str = "127.0.0.1"
    SFTP_PORT: int = 22
    SFTP_USERNAME: str = "tester"
    SFTP_PASSWORD: str = "password"
    SFTP_TIMEOUT: Optional[float] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
