"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The bearer secret comes from AUTH_TOKEN (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - No token configured means every request is rejected

Design Decisions:
    - pydantic-settings with optional .env file
    - Defaults provided for all non-secret settings
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Auth
    auth_token: str | None = None

    @field_validator("auth_token", mode="before")
    @classmethod
    def blank_token_is_unset(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Catalog
    seed_catalog: bool = True
    default_page_limit: int = Field(10, ge=1)
    # Type-check update payloads like create payloads. false = apply as-is.
    strict_update_validation: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
