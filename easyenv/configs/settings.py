"""
Unified library settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the library
"""

from functools import lru_cache

from pydantic import Field

from easyenv.configs.base import BaseSettings
from easyenv.configs.database import DatabaseSettings
from easyenv.configs.env_files import EnvFileSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    env_files: EnvFileSettings = Field(default_factory=EnvFileSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns Settings instance, cached after the first call.
    Environment variables loaded once.

    Returns:
        Settings: Settings instance

    Usage:
        from easyenv.configs import get_settings
        settings = get_settings()
    """
    return Settings()
