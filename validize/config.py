"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): environment read once per process
    - The trace flag is handed to dispatchers at construction, never read by them

Design Decisions:
    - pydantic-settings over raw os.environ: validation, bool parsing, .env file support
    - VALIDIZE_ prefix: avoids collisions with the host application's variables
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="VALIDIZE_", case_sensitive=False,
        extra="ignore",
    )

    # Diagnostics: log validation/processing failures server-side
    trace: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
