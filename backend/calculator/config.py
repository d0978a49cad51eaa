"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - default_precision is within 0–4, default_theme is a Theme value

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with no .env
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from calculator.core.domain_types import Theme, MIN_PRECISION, MAX_PRECISION


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Calculator defaults for new sessions
    default_precision: int = Field(2, ge=MIN_PRECISION, le=MAX_PRECISION)
    default_theme: Theme = Theme.GRADIENT
    default_sound_enabled: bool = True

    # In-memory registry
    max_sessions: int = Field(1000, ge=1)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
