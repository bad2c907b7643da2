# SPDX-License-Identifier: Apache-2.0
"""All configuration via environment variables (12-factor). No hardcoded values."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from studymonitor.analytics.engine import AnalyticsOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = Field(default="sqlite:///./study_monitor.db", description="Database URL")

    # Deployment
    environment: str = Field(default="development", description="development | production")

    # CORS
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Analytics
    refresh_interval_seconds: int = Field(default=30, ge=1, le=3600, description="Polling hint for dashboards")
    default_window_days: int = Field(default=30, ge=0, le=3650, description="Window length when 'from' is omitted")
    analytics_rate_limit: str = Field(default="120/minute", description="slowapi limit for the analytics endpoint")

    @property
    def production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def analytics_options(self) -> AnalyticsOptions:
        return AnalyticsOptions(
            refresh_interval_seconds=self.refresh_interval_seconds,
            default_window_days=self.default_window_days,
        )


settings = Settings()

DATABASE_URL = settings.database_url
STUDY_NOT_FOUND_MESSAGE = "Study {study_id} was not found"
