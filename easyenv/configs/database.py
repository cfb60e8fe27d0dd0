"""
Database configuration settings.

Manages SQLite engine parameters for SQLAlchemy.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from easyenv.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """SQLite database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EASYENV_DB_",
        case_sensitive=False,
        extra="ignore",
    )

    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")
    timeout: float = Field(
        default=5.0,
        ge=0,
        description="Seconds SQLite waits on a locked database file",
    )
    foreign_keys: bool = Field(
        default=True,
        description="Enable PRAGMA foreign_keys on every connection",
    )

    def database_url(self, path: str) -> str:
        """
        Construct SQLite connection URL for a database file.

        Args:
            path: Absolute path of the database file

        Returns:
            str: SQLAlchemy-compatible database URL
        """
        return f"sqlite:///{path}"
