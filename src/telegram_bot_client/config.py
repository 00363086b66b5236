"""Client configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    telegram_bot_token: str
    telegram_api_base_url: str = "https://api.telegram.org"
    telegram_proxy_url: str | None = None
    telegram_request_timeout: float = 10.0
    telegram_raise_on_error: bool = True
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def bot_base_url(self) -> str:
        """Base address all method paths are resolved against."""
        base = self.telegram_api_base_url.rstrip("/")
        return f"{base}/bot{self.telegram_bot_token}/"


def parse_proxy_url(raw: str | None) -> str | None:
    """Normalize the proxy setting; blank values disable the proxy."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None
    if "://" not in cleaned:
        return f"http://{cleaned}"
    return cleaned
