"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

MAIN_STATUS = "メイン"
REST_PAUSE_STATUS = "レストポーズ"
DEFAULT_CHART_STATUSES = (MAIN_STATUS, REST_PAUSE_STATUS)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    chart_statuses: str = ",".join(DEFAULT_CHART_STATUSES)
    main_status: str = MAIN_STATUS
    export_prefix: str = "training_log"
    timezone: str = "Asia/Tokyo"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_status_list(raw: str | None) -> list[str]:
    """Parse a comma separated list of set statuses from env."""
    if raw is None:
        return []
    statuses: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value and value not in statuses:
            statuses.append(value)
    return statuses


def resolve_chart_statuses(raw: str | None) -> list[str]:
    """Return the statuses counted by charts, falling back to the defaults."""
    return parse_status_list(raw) or list(DEFAULT_CHART_STATUSES)
