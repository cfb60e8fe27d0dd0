"""
Environment file configuration settings.

Controls where project environment files are exported and how they
are named and encoded.

Dependencies: pydantic, pydantic_settings
System role: File exporter configuration
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from easyenv.configs.base import BaseSettings


class EnvFileSettings(BaseSettings):
    """Project environment file configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EASYENV_FILES_",
        case_sensitive=False,
        extra="ignore",
    )

    env_dir: Path = Field(
        default=Path.home() / ".easyenv" / "environments",
        description="Directory holding one environment file per project",
    )
    suffix: str = Field(default=".env", description="File name suffix")
    encoding: str = Field(default="utf-8", description="Environment file encoding")
