"""
Tests for EasyEnv connection lifecycle.

Covers load/open/close routing, the current connection, duplicate loads,
closing without a current database, and schema creation.
Dependencies: pytest, easyenv.core
System role: Session manager lifecycle verification
"""

import os
from pathlib import Path

import pytest

from easyenv.core.connection import Connection
from easyenv.core.exceptions import (
    BackendCloseError,
    BackendOpenError,
    BackendQueryError,
    ConnectionClosedError,
    ConnectionNotFoundError,
    NoCurrentConnectionError,
    NotFoundError,
)
from easyenv.core.session_manager import EasyEnv


class TestLoad:
    """Test suite for EasyEnv.load()."""

    def test_load_registers_connection_and_makes_it_current(
        self, easy: EasyEnv, db_path: Path
    ) -> None:
        """Test a loaded database is named after its file and empty."""
        connection = easy.load(db_path)

        assert isinstance(connection, Connection)
        assert connection.name == "envs.db"
        assert connection.path == os.path.realpath(db_path)
        assert connection.projects == {}
        assert connection.templates == {}
        assert easy.current_connection is connection
        assert db_path.is_file()

    def test_distinct_paths_are_kept_in_order_latest_current(
        self, easy: EasyEnv, temp_dir: Path
    ) -> None:
        """Test two loads list both databases and keep the last one current."""
        first = easy.load(temp_dir / "one.db")
        second = easy.load(temp_dir / "two.db")

        assert easy.get_databases() == (first, second)
        assert easy.get_current_database() is second

    def test_loading_same_path_returns_existing_connection(
        self, easy: EasyEnv, temp_dir: Path
    ) -> None:
        """Test load is idempotent per path and never duplicates entries."""
        # Arrange
        first = easy.load(temp_dir / "one.db")
        easy.load(temp_dir / "two.db")

        # Act
        again = easy.load(temp_dir / "one.db")

        # Assert
        assert again is first
        assert len(easy.get_databases()) == 2
        assert easy.get_current_database() is first

    def test_relative_and_absolute_paths_are_the_same_connection(
        self, easy: EasyEnv, temp_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test paths are normalized before lookup."""
        monkeypatch.chdir(temp_dir)

        relative = easy.load("envs.db")
        absolute = easy.load(temp_dir / "envs.db")

        assert relative is absolute

    def test_unopenable_path_raises_and_registers_nothing(
        self, easy: EasyEnv, temp_dir: Path
    ) -> None:
        with pytest.raises(BackendOpenError):
            easy.load(temp_dir / "missing" / "envs.db")

        assert easy.get_databases() == ()
        assert easy.current_connection is None


class TestOpen:
    """Test suite for EasyEnv.open()."""

    def test_open_unknown_path_raises_not_found(self, easy: EasyEnv, db_path: Path) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            easy.open(db_path)

        assert exc_info.value.identifier == os.path.realpath(db_path)

    def test_open_switches_current_without_touching_list(
        self, easy: EasyEnv, temp_dir: Path
    ) -> None:
        """Test open only moves the current pointer."""
        # Arrange
        first = easy.load(temp_dir / "one.db")
        easy.load(temp_dir / "two.db")
        before = easy.get_databases()

        # Act
        opened = easy.open(temp_dir / "one.db")

        # Assert
        assert opened is first
        assert easy.get_current_database() is first
        assert easy.get_databases() == before


class TestCloseDB:
    """Test suite for EasyEnv.close_db()."""

    def test_close_current_removes_it_and_clears_current(
        self, easy: EasyEnv, temp_dir: Path
    ) -> None:
        """Test closing the current database leaves no current database."""
        # Arrange
        first = easy.load(temp_dir / "one.db")
        second = easy.load(temp_dir / "two.db")

        # Act
        easy.close_db(temp_dir / "two.db")

        # Assert
        assert easy.get_databases() == (first,)
        assert second.closed is True
        assert easy.current_connection is None
        with pytest.raises(NoCurrentConnectionError):
            easy.get_projects()
        with pytest.raises(NoCurrentConnectionError):
            easy.add_project("web", "/srv/web")

    def test_close_other_database_keeps_current(self, easy: EasyEnv, temp_dir: Path) -> None:
        first = easy.load(temp_dir / "one.db")
        second = easy.load(temp_dir / "two.db")

        easy.close_db(temp_dir / "one.db")

        assert easy.get_databases() == (second,)
        assert first.closed is True
        assert easy.get_current_database() is second

    def test_close_with_no_current_database_still_closes(
        self, easy: EasyEnv, temp_dir: Path
    ) -> None:
        """Test closing works when the current database was already closed."""
        # Arrange: close the current one so none is current
        first = easy.load(temp_dir / "one.db")
        easy.load(temp_dir / "two.db")
        easy.close_db(temp_dir / "two.db")
        assert easy.current_connection is None

        # Act
        easy.close_db(temp_dir / "one.db")

        # Assert
        assert first.closed is True
        assert easy.get_databases() == ()
        assert easy.current_connection is None

    def test_close_unknown_path_raises_not_found(self, easy: EasyEnv, db_path: Path) -> None:
        with pytest.raises(ConnectionNotFoundError):
            easy.close_db(db_path)

    def test_close_failure_keeps_connection_registered(
        self, easy: EasyEnv, db_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a failed close leaves the session unchanged."""
        # Arrange
        connection = easy.load(db_path)

        def failing_close(self) -> None:
            raise BackendCloseError(self.path)

        monkeypatch.setattr(Connection, "close", failing_close)

        # Act & Assert
        with pytest.raises(BackendCloseError):
            easy.close_db(db_path)

        assert easy.get_databases() == (connection,)
        assert easy.get_current_database() is connection
        monkeypatch.undo()

    def test_reload_after_close_opens_new_connection(self, easy: EasyEnv, db_path: Path) -> None:
        first = easy.load(db_path)
        easy.close_db(db_path)

        second = easy.load(db_path)

        assert second is not first
        assert easy.get_databases() == (second,)


class TestCloseAll:
    """Test suite for EasyEnv.close_all() and context manager use."""

    def test_close_all_closes_everything(self, easy: EasyEnv, temp_dir: Path) -> None:
        connections = [easy.load(temp_dir / f"{index}.db") for index in range(3)]

        easy.close_all()

        assert easy.get_databases() == ()
        assert easy.current_connection is None
        assert all(connection.closed for connection in connections)

    def test_context_manager_closes_on_exit(self, settings, exporter, db_path: Path) -> None:
        with EasyEnv(settings=settings, exporter=exporter) as session:
            connection = session.load(db_path)

        assert connection.closed is True
        assert session.get_databases() == ()


class TestCreateNewDB:
    """Test suite for EasyEnv.create_new_db()."""

    def test_creates_schema_and_loads_empty_caches(self, easy: EasyEnv, db_path: Path) -> None:
        """Test a new database is current and readable right away."""
        connection = easy.create_new_db(db_path)

        assert easy.get_current_database() is connection
        assert easy.load_projects() == {}
        assert easy.load_templates() == {}

    def test_schema_failure_leaves_connection_registered(
        self, easy: EasyEnv, db_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the partial-failure state after table creation fails."""
        # Arrange
        def failing_create_tables(self) -> None:
            raise BackendQueryError("disk I/O error", operation="create_tables")

        monkeypatch.setattr(Connection, "create_tables", failing_create_tables)

        # Act
        with pytest.raises(BackendQueryError):
            easy.create_new_db(db_path)

        # Assert
        assert len(easy.get_databases()) == 1
        assert easy.get_current_database().path == os.path.realpath(db_path)


class TestClosedConnection:
    """Test suite for using a Connection after it was closed."""

    def test_persistence_on_closed_connection_raises(
        self, easy: EasyEnv, db_path: Path
    ) -> None:
        """Test a kept reference cannot reopen the file through persistence."""
        # Arrange
        connection = easy.create_new_db(db_path)
        easy.close_db(db_path)

        # Act & Assert
        with pytest.raises(ConnectionClosedError) as exc_info:
            connection.persistence.select_projects()

        assert exc_info.value.path == os.path.realpath(db_path)

    def test_create_tables_on_closed_connection_raises(
        self, easy: EasyEnv, db_path: Path
    ) -> None:
        connection = easy.create_new_db(db_path)
        easy.close_db(db_path)

        with pytest.raises(ConnectionClosedError):
            connection.create_tables()

    def test_closing_twice_raises(self, easy: EasyEnv, db_path: Path) -> None:
        connection = easy.load(db_path)
        easy.close_db(db_path)

        with pytest.raises(ConnectionClosedError):
            connection.close()
