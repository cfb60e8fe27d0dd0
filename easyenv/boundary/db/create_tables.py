"""
Database table creation.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy
System role: Database schema initialization
"""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from easyenv.boundary.db.base import Base
from easyenv.core.exceptions import BackendQueryError

# Import all models to register them with Base.metadata
from easyenv.boundary.db.models.project_model import ProjectModel  # noqa: F401
from easyenv.boundary.db.models.template_model import TemplateModel  # noqa: F401

logger = logging.getLogger(__name__)


def create_all_tables(engine: Engine) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Engine of the target database

    Raises:
        BackendQueryError: If table creation fails (read-only file, corrupt schema)
    """
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.error("Failed to create tables", extra={"error": str(e)})
        raise BackendQueryError(
            f"Table creation failed: {e}", operation="create_tables"
        ) from e
    logger.info("Tables created", extra={"url": str(engine.url)})

