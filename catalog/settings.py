"""Application settings via Pydantic Settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # App
    app_name: str = "Catalog Browser"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("CATALOG_LOG_LEVEL", "LOG_LEVEL"),
    )

    # Database (SQLite)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./catalog.db",
        validation_alias=AliasChoices("CATALOG_DATABASE_URL", "DATABASE_URL"),
    )

    # Seed the default taxonomy when the controller starts against an empty store
    seed_on_startup: bool = Field(
        default=True,
        validation_alias=AliasChoices("CATALOG_SEED_ON_STARTUP", "SEED_ON_STARTUP"),
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> str:
        """Accept lowercase names ("debug") and treat empty values as INFO."""
        s = str(v or "").strip().upper()
        if s == "WARN":
            return "WARNING"
        return s or "INFO"

    @property
    def async_database_url(self) -> str:
        """Get database URL with the aiosqlite driver.

        Plain sqlite:// URLs (as written by hand or in alembic.ini) use the
        blocking pysqlite driver; the catalog needs the async one.
        """
        url = self.database_url
        if url.startswith("sqlite://"):
            url = url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return url


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
