"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), single instance per process
    - Engine selection lives here, never in request handling code

Design Decisions:
    - Two engines: PostgreSQL (asyncpg) in production, SQLite (aiosqlite) locally
    - Defaults work out-of-the-box for local development (no env vars needed)
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _to_asyncpg_url(v: str) -> str:
    """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
    if v.startswith("postgres://"):
        return v.replace("postgres://", "postgresql+asyncpg://", 1)
    if v.startswith("postgresql://"):
        return v.replace("postgresql://", "postgresql+asyncpg://", 1)
    return v


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "Employee Admin Portal API"
    app_version: str = "1.0.0"
    app_env: Literal["development", "production", "test"] = "development"

    # Database
    database_url: str = ""
    local_database_url: str = "sqlite+aiosqlite:///./employees.db"
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_create_tables: bool = True

    @field_validator("database_url", "local_database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        if isinstance(v, str):
            return _to_asyncpg_url(v.strip())
        return v

    # Which end of the salary ordering /highest-salary returns
    salary_extreme: Literal["lowest", "highest"] = "lowest"

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def effective_database_url(self) -> str:
        """Production (or an explicit PostgreSQL URL) uses database_url, else the local engine."""
        if self.is_production or self.database_url.startswith("postgresql"):
            if not self.database_url:
                raise ValueError("DATABASE_URL must be set in production")
            return self.database_url
        return self.local_database_url or self.database_url


@lru_cache
def get_settings() -> Settings:
    return Settings()
