"""
Configuration Management Module

Configures application parameters via environment variables or .env file.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "GameLayer Demo Proxy"
    DEBUG: bool = False
    # Overrides the DEBUG-derived level (DEBUG/INFO/WARNING/ERROR)
    LOG_LEVEL: Optional[str] = None

    # Upstream Config
    # GameLayer origin, requests are forwarded to {origin}/api/v0/...
    GAMELAYER_ORIGIN: str = "https://api.gamelayer.co"
    # Fallback api-key, used only when the inbound request carries none
    GAMELAYER_API_KEY: Optional[str] = None
    # Account id sent as the "account" query parameter by the API client
    GAMELAYER_ACCOUNT_ID: str = "gl-assets"
    # Player used by the API client when a call omits one
    GAMELAYER_DEFAULT_PLAYER: Optional[str] = None

    # HTTP Client Config
    # Upstream request timeout (seconds)
    HTTP_TIMEOUT: float = 30.0

    # Dev Server Config
    DEV_SERVER_HOST: str = "127.0.0.1"
    DEV_SERVER_PORT: int = 8000
    # Directory served as static files by the dev server
    STATIC_ROOT: Path = Field(default_factory=Path.cwd)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def api_base_url(self) -> str:
        """Upstream API root, e.g. https://api.gamelayer.co/api/v0"""
        return f"{self.GAMELAYER_ORIGIN.rstrip('/')}/api/v0"


@lru_cache()
def get_settings() -> Settings:
    """
    Get application configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
