"""
Session manager: the EasyEnv facade.

Owns the open database connections of one session, tracks which one is
current, and routes every project/template operation to it.

Dependencies: easyenv.core.connection, easyenv.boundary.env_file, easyenv.configs
System role: Public entry point for connection lifecycle and environment management
"""

import logging
import os

from easyenv.boundary.env_file.exporter import EnvFileExporter
from easyenv.configs import Settings, get_settings
from easyenv.core.connection import Connection, normalize_path
from easyenv.core.exceptions import (
    ConnectionNotFoundError,
    NoCurrentConnectionError,
    ProjectNotFoundError,
    TemplateNotFoundError,
)
from easyenv.models.project import Project
from easyenv.models.template import Template

logger = logging.getLogger(__name__)


class EasyEnv:
    """
    Session over a set of environment databases.

    Connections are kept in load order and keyed by their resolved path. The
    current connection is stored as that key, so closing a connection can
    never leave a dangling current reference.

    Project and template edits only touch the current connection's cache.
    save_db() persists the cache, exports project environments and reloads
    both maps, so entity objects fetched before a save are stale afterwards
    and must be fetched again by ID.

    Usage:
        with EasyEnv() as easy:
            easy.create_new_db("~/envs.db")
            project = easy.add_project("web", "/srv/web")
            project.add_environment("PORT", "8080")
            easy.save_db()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        exporter: EnvFileExporter | None = None,
    ) -> None:
        """
        Initialize an empty session.

        Args:
            settings: Library settings (defaults to get_settings())
            exporter: Environment file exporter (defaults to one built from settings)
        """
        self.settings = settings or get_settings()
        self.exporter = exporter or EnvFileExporter.from_settings(self.settings.env_files)
        self._connections: dict[str, Connection] = {}
        self._current_path: str | None = None

    def __enter__(self) -> "EasyEnv":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close_all()

    def _get_connection_by_path(self, path: str) -> Connection:
        connection = self._connections.get(path)
        if connection is None:
            raise ConnectionNotFoundError(path)
        return connection

    @property
    def current_connection(self) -> Connection | None:
        if self._current_path is None:
            return None
        return self._connections.get(self._current_path)

    def get_current_database(self) -> Connection:
        """
        Return the current connection.

        Raises:
            NoCurrentConnectionError: If no database is loaded or opened
        """
        connection = self.current_connection
        if connection is None:
            raise NoCurrentConnectionError()
        return connection

    # Connection lifecycle

    def load(self, path: str | os.PathLike) -> Connection:
        """
        Open (or create) a database file and make it current.

        Loading a path that is already registered returns the existing
        connection and makes it current; no second handle is opened.

        Args:
            path: Database file path

        Returns:
            Connection: The new or existing connection

        Raises:
            BackendOpenError: If the file cannot be opened
        """
        db_path = normalize_path(path)

        existing = self._connections.get(db_path)
        if existing is not None:
            self._current_path = db_path
            logger.info("Database already loaded", extra={"path": db_path})
            return existing

        connection = Connection.open(db_path, self.settings.database)
        self._connections[db_path] = connection
        self._current_path = db_path
        logger.info("Database loaded", extra={"path": db_path, "db_name": connection.name})
        return connection

    def open(self, path: str | os.PathLike) -> Connection:
        """
        Make an already loaded database current.

        Raises:
            ConnectionNotFoundError: If the path was never loaded
        """
        db_path = normalize_path(path)
        connection = self._get_connection_by_path(db_path)
        self._current_path = db_path
        logger.info("Database opened", extra={"path": db_path})
        return connection

    def close_db(self, path: str | os.PathLike) -> None:
        """
        Close a database and remove it from the session.

        Does not require a current connection. If the closed database was
        current, no database is current afterwards.

        Raises:
            ConnectionNotFoundError: If the path is not loaded
            BackendCloseError: If the handle fails to close; the connection stays registered
        """
        db_path = normalize_path(path)
        connection = self._get_connection_by_path(db_path)

        connection.close()
        del self._connections[db_path]

        if self._current_path == db_path:
            self._current_path = None

        logger.info("Database closed", extra={"path": db_path})

    def close_all(self) -> None:
        """Close every loaded database in load order, stopping at the first failure."""
        for path in list(self._connections):
            self.close_db(path)

    def create_new_db(self, path: str | os.PathLike) -> Connection:
        """
        Load a database and create the schema in it.

        If schema creation fails the connection stays loaded and current.

        Raises:
            BackendOpenError: If the file cannot be opened
            BackendQueryError: If table creation fails
        """
        connection = self.load(path)
        connection.create_tables()
        return connection

    def get_databases(self) -> tuple[Connection, ...]:
        """Return every loaded connection in load order."""
        return tuple(self._connections.values())

    # Persistence

    def save_db(self) -> None:
        """
        Persist the current cache, export project files, then reload.

        Steps run in order and stop at the first failure: save every cached
        project and template in one transaction, write each project's
        environment file, reload projects (importing from their files), and
        reload templates.

        Raises:
            NoCurrentConnectionError: If no database is current
            BackendQueryError: If the save or a reload select fails
            FileWriteError: If a project file cannot be written
            FileReadError: If a project file cannot be read back
        """
        connection = self.get_current_database()

        connection.persistence.save(connection.projects, connection.templates)
        self.save_all_project_environments_to_file()
        self.load_projects()
        self.load_templates()

        logger.info(
            "Database saved",
            extra={
                "path": connection.path,
                "projects": len(connection.projects),
                "templates": len(connection.templates),
            },
        )

    def save_all_project_environments_to_file(self) -> None:
        """
        Export every cached project's environment to its file.

        Stops at the first failing project; earlier files stay written.

        Raises:
            NoCurrentConnectionError: If no database is current
            FileWriteError: If a file cannot be written
        """
        connection = self.get_current_database()
        for project in connection.projects.values():
            project.save_environments_to_file(self.exporter)

    def load_projects(self) -> dict[str, Project]:
        """
        Rebuild the project cache from the database and project files.

        The cache is replaced before files are imported, so a file read
        failure leaves the new cache partially imported.

        Raises:
            NoCurrentConnectionError: If no database is current
            BackendQueryError: If the select fails
            FileReadError: If a project's file cannot be read
        """
        connection = self.get_current_database()
        projects = connection.persistence.select_projects()
        connection.projects = projects

        for project in projects.values():
            project.load_environments_from_file(self.exporter)

        logger.debug("Projects loaded", extra={"path": connection.path, "count": len(projects)})
        return projects

    def load_templates(self) -> dict[str, Template]:
        """
        Rebuild the template cache from the database.

        Raises:
            NoCurrentConnectionError: If no database is current
            BackendQueryError: If the select fails
        """
        connection = self.get_current_database()
        templates = connection.persistence.select_templates()
        connection.templates = templates

        logger.debug("Templates loaded", extra={"path": connection.path, "count": len(templates)})
        return templates

    # Projects and templates

    def add_project(self, name: str, path: str) -> Project:
        """Create a project in the current cache; persisted on the next save_db()."""
        connection = self.get_current_database()
        project = Project(name=name, path=path)
        connection.projects[project.project_id] = project
        return project

    def add_template(self, name: str) -> Template:
        """Create a template in the current cache; persisted on the next save_db()."""
        connection = self.get_current_database()
        template = Template(name=name)
        connection.templates[template.template_id] = template
        return template

    def add_template_envs_to_project(self, template_id: str, project_id: str) -> Project:
        """
        Copy every template variable into a project.

        Template values overwrite project values for the same key. Only the
        cache changes; call save_db() to persist.

        Raises:
            NoCurrentConnectionError: If no database is current
            ProjectNotFoundError: If the project ID is unknown
            TemplateNotFoundError: If the template ID is unknown
        """
        project = self.get_project(project_id)
        template = self.get_template(template_id)

        for env in template.get_environments():
            project.add_environment(env.get_key(), env.get_value())

        return project

    def get_project(self, project_id: str) -> Project:
        connection = self.get_current_database()
        project = connection.projects.get(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    def get_projects(self) -> dict[str, Project]:
        return self.get_current_database().projects

    def get_template(self, template_id: str) -> Template:
        connection = self.get_current_database()
        template = connection.templates.get(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template

    def get_templates(self) -> dict[str, Template]:
        return self.get_current_database().templates
