"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for talent-scout."""

    model_config = SettingsConfigDict(env_prefix="TS_", env_file=".env")

    # --- Search provider ---
    serpapi_api_key: SecretStr | None = Field(
        default=None,
        description="SerpAPI key; discovery cannot run without it",
    )
    serpapi_base_url: str = Field(
        default="https://serpapi.com/search.json",
        description="SerpAPI search endpoint",
    )
    search_page_size: int = Field(
        default=10,
        description="Number of Google results requested per search",
    )
    search_retry_max: int = Field(
        default=3,
        description="Attempts per search request on transport errors",
    )
    search_retry_wait_min: float = Field(
        default=1.0,
        description="Minimum retry wait in seconds",
    )
    search_retry_wait_max: float = Field(
        default=10.0,
        description="Maximum retry wait in seconds",
    )
    search_rate_limit_per_minute: int = Field(
        default=10,
        description="Searches allowed per minute across all runs in this process",
    )

    # --- Scrape provider ---
    brightdata_api_key: SecretStr | None = Field(
        default=None,
        description="Bright Data key; scraping is skipped when absent",
    )
    brightdata_base_url: str = Field(
        default="https://api.brightdata.com/datasets/v3",
        description="Bright Data datasets API base URL",
    )
    brightdata_dataset_id: str = Field(
        default="gd_l1viktl72bvl7bjuj0",
        description="Dataset ID of the LinkedIn profile collector",
    )
    poll_interval_seconds: float = Field(
        default=10.0,
        description="Wait before each snapshot status check",
    )
    poll_max_attempts: int = Field(
        default=20,
        description="Status checks before a scrape job is declared timed out",
    )

    # --- HTTP ---
    request_timeout_seconds: float = Field(
        default=30.0,
        description="Deadline for every individual provider request",
    )

    # --- Database ---
    database_url: str = Field(
        default="sqlite+aiosqlite:///./talent_scout.db",
        description="SQLAlchemy database URL for learned role patterns",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer",
    )

    # --- Tracing (optional) ---
    otel_exporter: Literal["none", "console", "otlp"] = Field(
        default="none",
        description="OpenTelemetry span exporter",
    )
    otel_endpoint: str = Field(
        default="http://localhost:4317",
        description="OTLP collector endpoint",
    )
    otel_service_name: str = Field(
        default="talent-scout",
        description="Service name reported on spans",
    )

    @model_validator(mode="after")
    def validate_poll_budget(self) -> Settings:
        """Reject poll budgets that could never reach a terminal state."""
        if self.poll_max_attempts < 1:
            msg = "poll_max_attempts must be at least 1"
            raise ValueError(msg)
        if self.poll_interval_seconds < 0:
            msg = "poll_interval_seconds cannot be negative"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def validate_search_config(self) -> Settings:
        """Ensure search paging and retry values are usable."""
        if not 1 <= self.search_page_size <= 100:
            msg = "search_page_size must be between 1 and 100"
            raise ValueError(msg)
        if self.search_retry_max < 1:
            msg = "search_retry_max must be at least 1"
            raise ValueError(msg)
        return self
