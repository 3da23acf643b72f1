"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.

    All settings can be overridden via QIWI_-prefixed environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="QIWI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote API
    api_url: str = "https://edge.qiwi.com"
    api_timeout: float = 30.0

    # Payment history
    history_page_size: int = Field(default=50, ge=1, le=50)

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return value


class Credentials(BaseSettings):
    """
    Wallet credentials: the owner's phone number and API token.

    Usually read from the file written by ``qiwi-cli login``:

        Credentials(_env_file=path)
    """

    model_config = SettingsConfigDict(
        env_prefix="QIWI_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    phone: str
    token: SecretStr


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
