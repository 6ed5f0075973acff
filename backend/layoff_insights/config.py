"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - PORT defaults to 3000 when unset
    - get_settings() is cached (lru_cache) — single instance per process
    - Settings are passed explicitly into create_app()/run(), never read as module constants

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - CORS permits every origin unless CORS_ORIGINS is set
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
