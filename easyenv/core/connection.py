"""
Database connection: one open SQLite file plus its in-memory caches.

Dependencies: sqlalchemy, easyenv.boundary.db, easyenv.models
System role: Owner of a backend handle and its project/template cache
"""

import os
from dataclasses import dataclass, field

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from easyenv.application.services.persistence_service import PersistenceService
from easyenv.boundary.db.connection import close_engine, get_session_factory, open_engine
from easyenv.boundary.db.create_tables import create_all_tables
from easyenv.configs.database import DatabaseSettings
from easyenv.core.exceptions import ConnectionClosedError
from easyenv.models.project import Project
from easyenv.models.template import Template


def normalize_path(path: str | os.PathLike) -> str:
    """Return the absolute, symlink-resolved form of a database path."""
    return os.path.realpath(os.path.expanduser(os.fspath(path)))


@dataclass(eq=False)
class Connection:
    """
    One open database file and the projects/templates loaded from it.

    The project and template maps are a cache: they mirror the database
    only right after a load, and diverge after any in-memory edit until
    the next save.

    Attributes:
        path: Absolute database path, unique within a session
        engine: SQLAlchemy engine owning the file handle
        name: Database file name (last path segment)
        projects: Cached projects keyed by project ID
        templates: Cached templates keyed by template ID
        closed: True once the engine has been disposed
    """

    path: str
    engine: Engine
    name: str = field(init=False)
    session_factory: sessionmaker = field(init=False, repr=False)
    projects: dict[str, Project] = field(default_factory=dict, repr=False)
    templates: dict[str, Template] = field(default_factory=dict, repr=False)
    closed: bool = False

    def __post_init__(self) -> None:
        self.name = os.path.basename(self.path)
        self.session_factory = get_session_factory(self.engine)

    @classmethod
    def open(cls, path: str, settings: DatabaseSettings | None = None) -> "Connection":
        """
        Open a database file and wrap it with empty caches.

        Args:
            path: Normalized database path
            settings: Database settings for the engine

        Raises:
            BackendOpenError: If the file cannot be opened
        """
        return cls(path=path, engine=open_engine(path, settings))

    def _ensure_open(self) -> None:
        if self.closed:
            raise ConnectionClosedError(self.path)

    @property
    def persistence(self) -> PersistenceService:
        """
        Persistence service bound to this database.

        Raises:
            ConnectionClosedError: If the connection has been closed
        """
        self._ensure_open()
        return PersistenceService(self.session_factory)

    def create_tables(self) -> None:
        """
        Create the schema in this database (idempotent).

        Raises:
            ConnectionClosedError: If the connection has been closed
            BackendQueryError: If table creation fails
        """
        self._ensure_open()
        create_all_tables(self.engine)

    def close(self) -> None:
        """
        Dispose the engine; the connection is unusable afterwards.

        Raises:
            ConnectionClosedError: If the connection is already closed
            BackendCloseError: If the engine fails to close
        """
        self._ensure_open()
        close_engine(self.engine, self.path)
        self.closed = True
