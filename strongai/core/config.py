"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from strongai.core.enums import UnitSystem


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STRONGAI_",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "StrongAI"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API (local bridge for the UI layer)
    api_v1_prefix: str = "/api/v1"
    cors_origins: str = ""

    # Database (local single-user store)
    database_url: str = "sqlite+aiosqlite:///./strongai.db"
    database_auto_create: bool = True

    # Pool (ignored for SQLite)
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Rest timer wake interval in seconds
    rest_timer_tick_seconds: float = 0.1

    # Units and analytics defaults
    unit_system: UnitSystem = UnitSystem.METRIC
    default_height_inches: float = 70.0
    default_body_weight_lbs: float = 150.0
    weekly_window_weeks: int = 8

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def sync_database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        return self.database_url.replace("+aiosqlite", "").replace("+asyncpg", "+psycopg")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
