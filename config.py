"""
Configuration settings for the olympiad question engine.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Stores
    # ========================================
    store_backend: Literal["memory", "sql"] = Field(
        default="memory",
        description="Backend for history/curated stores when no REST endpoint is set",
    )
    database_url: str = Field(
        default="sqlite:///olympiad.db",
        description="SQLAlchemy connection string (sqlite or postgresql)",
    )
    rest_url: str | None = Field(
        default=None,
        description="PostgREST base URL, e.g. https://<project>.supabase.co/rest/v1",
    )
    rest_api_key: str | None = Field(
        default=None,
        description="API key sent as apikey/Bearer header to the REST backend",
    )
    rest_timeout_seconds: float = Field(
        default=4.0,
        description="Per-request timeout for REST store calls",
    )
    store_timeout_seconds: float = Field(
        default=5.0,
        description="Hard timeout for any store call; a hang becomes a StoreTimeoutError",
    )
    curated_seed_file: str | None = Field(
        default=None,
        description="JSON file of curated rows loaded into the in-memory store",
    )

    # ========================================
    # Engine
    # ========================================
    default_session_size: int = Field(
        default=5,
        ge=1,
        description="Questions per session when the caller does not specify",
    )
    generation_attempts_per_question: int = Field(
        default=50,
        ge=1,
        description="Retry budget multiplier for unique procedural questions",
    )
    exclusion_scope: Literal["all", "curated"] = Field(
        default="all",
        description="Which seen signatures are sent to the curated store as exclusions",
    )
    streak_milestone: int = Field(
        default=25,
        ge=1,
        description="Streak length that triggers a celebration milestone",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for reproducible sessions (None = system entropy)",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    @property
    def use_rest(self) -> bool:
        """True when both REST endpoint and key are configured."""
        return bool(self.rest_url and self.rest_api_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
