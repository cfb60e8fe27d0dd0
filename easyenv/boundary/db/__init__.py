"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, StringIDMixin, TimestampMixin: Model building blocks
  - open_engine(), close_engine(), get_session_factory(), session_scope(): Backend handle lifecycle
  - create_all_tables(): Schema initialization
  - ProjectModel, TemplateModel and their environment rows
  - project_crud, template_crud: CRUD operation singletons

Dependencies: sqlalchemy, easyenv.configs
System role: SQLite adapter persisting projects, templates and their environments
"""

from easyenv.boundary.db.base import Base, StringIDMixin, TimestampMixin
from easyenv.boundary.db.connection import (
    close_engine,
    get_session_factory,
    open_engine,
    session_scope,
)
from easyenv.boundary.db.create_tables import create_all_tables
from easyenv.boundary.db.models import (
    ProjectEnvironmentModel,
    ProjectModel,
    TemplateEnvironmentModel,
    TemplateModel,
)
from easyenv.boundary.db.CRUD import (
    BaseCRUD,
    ProjectCRUD,
    TemplateCRUD,
    project_crud,
    template_crud,
)

__all__ = [
    # Base classes
    "Base",
    "StringIDMixin",
    "TimestampMixin",
    # Connection
    "open_engine",
    "close_engine",
    "get_session_factory",
    "session_scope",
    # Schema
    "create_all_tables",
    # Models
    "ProjectModel",
    "ProjectEnvironmentModel",
    "TemplateModel",
    "TemplateEnvironmentModel",
    # CRUD classes
    "BaseCRUD",
    "ProjectCRUD",
    "TemplateCRUD",
    # CRUD singletons
    "project_crud",
    "template_crud",
]
