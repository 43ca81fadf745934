"""Settings using Pydantic Settings, loaded from BOTMEDIA_* environment variables."""

from functools import lru_cache

import httpx
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.telegram.org/bot"


class Settings(BaseSettings):
    """Bot API access and HTTP client settings."""

    model_config = SettingsConfigDict(
        env_prefix="BOTMEDIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Bot API
    bot_token: SecretStr | None = None
    api_url: str = DEFAULT_API_URL

    # HTTP
    http_timeout: float = Field(default=30.0, gt=0)
    http_connect_timeout: float = Field(default=10.0, gt=0)

    # Logging
    log_level: str = "INFO"

    def http_client_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.http_timeout, connect=self.http_connect_timeout)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
