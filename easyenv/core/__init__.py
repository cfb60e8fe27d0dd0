"""
Core module.

Contains the exception hierarchy, the Connection type and the EasyEnv
session facade.
"""

from easyenv.core.exceptions import (
    EasyEnvException,
    BackendError,
    BackendOpenError,
    BackendCloseError,
    ConnectionClosedError,
    BackendQueryError,
    NotFoundError,
    ConnectionNotFoundError,
    ProjectNotFoundError,
    TemplateNotFoundError,
    NoCurrentConnectionError,
    EnvFileError,
    FileWriteError,
    FileReadError,
)

from easyenv.core.connection import Connection
from easyenv.core.session_manager import EasyEnv

__all__ = [
    # Exceptions
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
    # Session
    "Connection",
    "EasyEnv",
]
