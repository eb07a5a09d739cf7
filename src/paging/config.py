"""Centralized application settings via pydantic-settings.

Loads configuration from environment variables with the PAGING_ prefix.
Defaults match the page/limit rules every generated request model applies.
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Override via environment variables (prefixed with PAGING_).

    Examples:
        Raise the page size cap::

            PAGING_MAX_LIMIT=5000 uv run fastapi dev src/paging/main.py
    """

    # Request defaults baked into generated request models
    default_page: int = Field(default=1, ge=1)
    default_limit: int = Field(default=10, ge=0)
    max_limit: int = Field(default=1000, ge=1)

    # Logging
    log_level: str = "INFO"

    # CORS origins for the demo API
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:8000",
    ]

    model_config = {"env_prefix": "PAGING_"}

    @model_validator(mode="after")
    def default_limit_within_cap(self) -> "Settings":
        if self.default_limit > self.max_limit:
            raise ValueError(
                f"default_limit ({self.default_limit}) exceeds max_limit ({self.max_limit})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings singleton.

    Uses lru_cache so the Settings object is created once and reused by
    the schema registry and FastAPI Depends injections.
    """
    return Settings()
