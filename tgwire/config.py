from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import DEFAULT_API_HOST


class TelegramSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TELEGRAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Bot token from @BotFather
    bot_token: str = Field(default="")

    # Host name or root URL (self-hosted Bot API server)
    api_host: str = DEFAULT_API_HOST

    # Per-request timeout in seconds, applied to every call
    timeout: float = 10.0


# Global settings instance
_settings: Optional[TelegramSettings] = None


def get_settings() -> TelegramSettings:
    global _settings
    if _settings is None:
        _settings = TelegramSettings()
    return _settings
