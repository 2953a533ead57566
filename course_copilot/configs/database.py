"""
Database configuration settings.

Manages PostgreSQL connection parameters for SQLAlchemy.
A full URL override allows SQLite for local development.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from course_copilot.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="course_copilot", description="PostgreSQL database name")

    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides host/port/user/password/db when set",
    )

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")
    auto_create_tables: bool = Field(
        default=False,
        description="Create missing tables on application startup",
    )

    sslmode: str = Field(default="prefer", description="SSL mode for PostgreSQL connections")

    @property
    def database_url(self) -> str:
        """
        Construct database connection URL.

        Returns:
            str: SQLAlchemy-compatible database URL
        """
        if self.url:
            return self.url
        return (
            f"postgresql://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}?sslmode={self.sslmode}"
        )

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured URL targets SQLite (no pool tuning)."""
        return self.database_url.startswith("sqlite")
