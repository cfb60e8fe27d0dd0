"""
Exception hierarchy for EasyEnv.

Provides layered exception structure for backend, lookup, session and
environment file errors. All exceptions include context for debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the library
"""

from pathlib import Path
from typing import Any


class EasyEnvException(Exception):
    """Base exception for all EasyEnv errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class BackendError(EasyEnvException):
    """Base exception for storage backend failures."""

    pass


class BackendOpenError(BackendError):
    """Raised when a database file cannot be opened."""

    def __init__(self, path: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize backend open error.

        Args:
            path: Database path that failed to open
            details: Additional context
        """
        details = details or {}
        details["path"] = path
        self.path = path
        super().__init__(f"Unable to open database: {path}", details)


class BackendCloseError(BackendError):
    """Raised when a database handle fails to close."""

    def __init__(self, path: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["path"] = path
        self.path = path
        super().__init__(f"Unable to close database: {path}", details)


class ConnectionClosedError(BackendError):
    """Raised when a closed connection is used again."""

    def __init__(self, path: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["path"] = path
        self.path = path
        super().__init__(f"Database connection is closed: {path}", details)


class BackendQueryError(BackendError):
    """Raised when a statement against the database fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize backend query error.

        Args:
            message: Error message
            operation: Operation that failed (create_tables, save, select_projects, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.operation = operation
        super().__init__(message, details)


class NotFoundError(EasyEnvException):
    """Raised when a connection, project or template lookup fails."""

    def __init__(
        self,
        resource: str,
        identifier: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            resource: Kind of thing looked up (connection, project, template)
            identifier: Path or ID that was not found
            details: Additional context
        """
        details = details or {}
        details[f"{resource}_id"] = identifier
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"No {resource} found with ID {identifier}", details)


class ConnectionNotFoundError(NotFoundError):
    """Raised when no connection is registered for a database path."""

    def __init__(self, path: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("connection", path, details)


class ProjectNotFoundError(NotFoundError):
    """Raised when a project ID is not in the current connection."""

    def __init__(self, project_id: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("project", project_id, details)


class TemplateNotFoundError(NotFoundError):
    """Raised when a template ID is not in the current connection."""

    def __init__(self, template_id: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("template", template_id, details)


class NoCurrentConnectionError(EasyEnvException):
    """Raised when an operation needs a current database and none is set."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            "No database is currently open. Load or open a database first "
            "using load(path) or open(path) before making any other calls",
            details,
        )


class EnvFileError(EasyEnvException):
    """Base exception for environment file export/import failures."""

    def __init__(
        self,
        message: str,
        project_id: str,
        path: Path | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize environment file error.

        Args:
            message: Error message
            project_id: Project whose environment file failed
            path: File location derived from the project ID
            details: Additional context
        """
        details = details or {}
        details["project_id"] = project_id
        if path is not None:
            details["path"] = str(path)
        self.project_id = project_id
        self.path = path
        super().__init__(message, details)


class FileWriteError(EnvFileError):
    """Raised when a project's environment file cannot be written."""

    pass


class FileReadError(EnvFileError):
    """Raised when a project's environment file cannot be read."""

    pass
