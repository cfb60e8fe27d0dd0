"""
Database connection management.

Provides SQLAlchemy engine lifecycle for SQLite database files, a
session factory per engine and a transactional session scope.

Dependencies: sqlalchemy, easyenv.configs
System role: Storage backend handle lifecycle (open, close, execute)
"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from easyenv.configs import get_settings
from easyenv.configs.database import DatabaseSettings
from easyenv.core.exceptions import BackendCloseError, BackendOpenError

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on SQLite foreign key enforcement for a new DBAPI connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON;")
    cursor.close()


def open_engine(path: str, settings: DatabaseSettings | None = None) -> Engine:
    """
    Open (creating if absent) a SQLite database file.

    The engine is probed by reading sqlite_master, which fails early for a
    missing parent directory or a file that is not a SQLite database.

    Args:
        path: Absolute path of the database file
        settings: Database settings; defaults to get_settings().database

    Returns:
        Engine: Engine bound to the database file

    Raises:
        BackendOpenError: If the file cannot be opened as a database
    """
    db_config = settings or get_settings().database

    try:
        engine = create_engine(
            db_config.database_url(path),
            echo=db_config.echo_sql,
            connect_args={"timeout": db_config.timeout},
        )
    except SQLAlchemyError as e:
        raise BackendOpenError(path, details={"error": str(e)}) from e

    if db_config.foreign_keys:
        event.listen(engine, "connect", _enable_foreign_keys)

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT count(*) FROM sqlite_master"))
    except SQLAlchemyError as e:
        engine.dispose()
        logger.error(
            "Failed to open database",
            extra={"path": path, "error": str(e)},
        )
        raise BackendOpenError(path, details={"error": str(e)}) from e

    return engine


def close_engine(engine: Engine, path: str) -> None:
    """
    Dispose an engine and its pooled DBAPI connections.

    Args:
        engine: Engine returned by open_engine
        path: Database path, for error context

    Raises:
        BackendCloseError: If the pool fails to close
    """
    try:
        engine.dispose()
    except SQLAlchemyError as e:
        logger.error(
            "Failed to close database",
            extra={"path": path, "error": str(e)},
        )
        raise BackendCloseError(path, details={"error": str(e)}) from e


def get_session_factory(engine: Engine) -> sessionmaker:
    """
    Create session factory for database operations.

    Returns sessionmaker bound to engine with autoflush=False for explicit
    transaction control and expire_on_commit=False so loaded rows stay
    readable after commit.

    Args:
        engine: Engine returned by open_engine

    Returns:
        sessionmaker: Session factory configured for manual transaction control
    """
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Provide a transactional scope around a series of operations.

    Commits on success, rolls back on any exception and always closes.

    Yields:
        Session: SQLAlchemy database session

    Usage:
        with session_scope(SessionFactory) as session:
            project_crud.upsert(session, project_id, name=..., path=...)
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
