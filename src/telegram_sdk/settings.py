"""
Settings loaded from the environment (and an optional ``.env`` file).
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from telegram_sdk.transport.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    bot_token: Optional[SecretStr] = Field(default=None, validation_alias="TELEGRAM_BOT_TOKEN")
    api_url: str = Field(default=DEFAULT_BASE_URL, validation_alias="TELEGRAM_API_URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, validation_alias="TELEGRAM_TIMEOUT", gt=0)
    log_level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("TELEGRAM_API_URL must be an http(s) URL")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))}")
        return level

    def token(self) -> Optional[str]:
        if self.bot_token is None:
            return None
        return self.bot_token.get_secret_value() or None


@lru_cache
def get_settings() -> Settings:
    return Settings()
