"""Package Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - no_color honours both CLARITY_NO_COLOR and the conventional NO_COLOR variable

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - NO_COLOR follows no-color.org: any non-empty value disables color, not only "true"
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_FALSY = {"", "0", "false", "no", "off"}


class Settings(BaseSettings):
    """Package settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLARITY_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Diagnostics
    no_color: bool = Field(
        False, validation_alias=AliasChoices("clarity_no_color", "no_color"),
    )

    @field_validator("no_color", mode="before")
    @classmethod
    def parse_no_color(cls, v: object) -> object:
        """NO_COLOR=anything disables color; only explicit falsy strings keep it."""
        if isinstance(v, str):
            return v.strip().lower() not in _FALSY
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
