"""
EasyEnv: project and template environment variables stored in SQLite
and exported to per-project dotenv files.

Usage:
    from easyenv import EasyEnv

    easy = EasyEnv()
    easy.create_new_db("envs.db")
    project = easy.add_project("web", "/srv/web")
    project.add_environment("PORT", "8080")
    easy.save_db()
"""

from easyenv.core import (
    BackendCloseError,
    BackendError,
    BackendOpenError,
    BackendQueryError,
    Connection,
    ConnectionClosedError,
    ConnectionNotFoundError,
    EasyEnv,
    EasyEnvException,
    EnvFileError,
    FileReadError,
    FileWriteError,
    NoCurrentConnectionError,
    NotFoundError,
    ProjectNotFoundError,
    TemplateNotFoundError,
)
from easyenv.boundary.env_file import EnvFileExporter
from easyenv.configs import Settings, get_settings
from easyenv.models import Environment, Project, Template

__version__ = "0.1.0"

__all__ = [
    "EasyEnv",
    "Connection",
    "EnvFileExporter",
    "Settings",
    "get_settings",
    "Environment",
    "Project",
    "Template",
    "EasyEnvException",
    "BackendError",
    "BackendOpenError",
    "BackendCloseError",
    "ConnectionClosedError",
    "BackendQueryError",
    "NotFoundError",
    "ConnectionNotFoundError",
    "ProjectNotFoundError",
    "TemplateNotFoundError",
    "NoCurrentConnectionError",
    "EnvFileError",
    "FileWriteError",
    "FileReadError",
]
