"""Client configuration via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings"]


class Settings(BaseSettings):
    """Credentials and endpoints, all values from environment."""

    model_config = SettingsConfigDict(env_prefix="MAPS_")

    # Simple API key authentication
    api_key: str = ""

    # Premium plan (client ID + URL-safe base64 secret)
    client_id: str = ""
    client_secret: str = ""

    base_url: str = "https://maps.googleapis.com"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    @property
    def premium_plan(self) -> bool:
        return bool(self.client_id and self.client_secret)
