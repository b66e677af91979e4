# theme_cart/settings.py
from __future__ import annotations
from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


def _normalize_url(v: str) -> str:
    """
    Storefront origin without a trailing slash, so request paths like
    '/cart.js' join onto it cleanly.
    """
    s = (v or "").strip()
    return s.rstrip("/") if s else "http://127.0.0.1:8000"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",   # ignore unknown env keys instead of raising
    )

    # --- Storefront ---
    # accept either STOREFRONT_URL or THEME_CART_URL
    storefront_url_raw: str = Field(
        default="http://127.0.0.1:8000",
        validation_alias=AliasChoices("STOREFRONT_URL", "THEME_CART_URL"),
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL",))

    # --- Stub storefront server ---
    api_host: str = Field(default="127.0.0.1", validation_alias=AliasChoices("API_HOST",))
    api_port: int = Field(default=8000,        validation_alias=AliasChoices("API_PORT",))

    @property
    def storefront_url(self) -> str:
        return _normalize_url(self.storefront_url_raw)

# singleton
settings = Settings()
