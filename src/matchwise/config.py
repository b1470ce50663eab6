"""Configuration management for Matchwise."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MATCHWISE_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Keys (no prefix, standard env vars)
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    anthropic_api_key: str | None = Field(default=None, alias="ANTHROPIC_API_KEY")
    google_api_key: str | None = Field(default=None, alias="GOOGLE_API_KEY")

    # Provider configuration
    provider: Literal["openai", "anthropic", "google"] = "anthropic"
    model: str | None = Field(
        default=None,
        description="Model override (provider default when unset)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Match summaries
    summary_enabled: bool = True
    summary_timeout_seconds: float = Field(
        default=30.0,
        ge=1,
        le=300,
        description="Per-request timeout for summary generation",
    )
    summary_max_retries: int = Field(default=1, ge=0, le=5)

    # Product thresholds
    interview_min_score: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Minimum overall score before an interview can be scheduled",
    )
    confidence_threshold: int = Field(
        default=50,
        ge=0,
        le=100,
        description="Minimum overall score for a match to be shown to applicants",
    )

    # Batch matching
    batch_max_workers: int = Field(default=8, ge=1, le=64)

    @property
    def api_key(self) -> str | None:
        """API key for the configured provider."""
        return {
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
            "google": self.google_api_key,
        }[self.provider]

    @property
    def has_api_key(self) -> bool:
        """Check if the configured provider has an API key."""
        return bool(self.api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
