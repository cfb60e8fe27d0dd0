"""
Persistence service orchestrator.

Moves projects and templates between a connection's in-memory cache and
its database: one transactional save of the whole cache, and full
selects that rebuild fresh entity maps.

Dependencies: sqlalchemy, easyenv.boundary.db, easyenv.models
System role: Save/reload orchestration for a single database
"""

import logging
from typing import Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from easyenv.boundary.db.connection import session_scope
from easyenv.boundary.db.CRUD.project_crud import project_crud
from easyenv.boundary.db.CRUD.template_crud import template_crud
from easyenv.core.exceptions import BackendQueryError
from easyenv.models.project import Project
from easyenv.models.template import Template

logger = logging.getLogger(__name__)


class PersistenceService:
    """Persistence orchestrator bound to one database's session factory."""

    def __init__(self, session_factory: sessionmaker) -> None:
        """
        Initialize persistence service.

        Args:
            session_factory: Session factory of the target database
        """
        self.session_factory = session_factory

    def save(
        self,
        projects: Mapping[str, Project],
        templates: Mapping[str, Template],
    ) -> None:
        """
        Persist every cached project and template in one transaction.

        Rows are upserted by ID and their environment rows replaced with the
        cached set. Rows absent from the cache are left untouched. The whole
        transaction rolls back on failure.

        Args:
            projects: Cached projects keyed by project ID
            templates: Cached templates keyed by template ID

        Raises:
            BackendQueryError: If any statement fails
        """
        try:
            with session_scope(self.session_factory) as session:
                for project in projects.values():
                    project_crud.upsert(
                        session,
                        project.project_id,
                        name=project.name,
                        path=project.path,
                    )
                    project_crud.replace_environments(
                        session, project.project_id, project.environments
                    )

                for template in templates.values():
                    template_crud.upsert(
                        session,
                        template.template_id,
                        name=template.name,
                    )
                    template_crud.replace_environments(
                        session, template.template_id, template.environments
                    )
        except SQLAlchemyError as e:
            logger.error(
                "Failed to save cache",
                extra={"error": str(e), "projects": len(projects), "templates": len(templates)},
            )
            raise BackendQueryError(f"Saving data failed: {e}", operation="save") from e

        logger.info(
            "Cache saved",
            extra={"projects": len(projects), "templates": len(templates)},
        )

    def select_projects(self) -> dict[str, Project]:
        """
        Read every project with its stored environment.

        Returns:
            dict[str, Project]: Fresh Project objects keyed by project ID

        Raises:
            BackendQueryError: If the select fails
        """
        try:
            with session_scope(self.session_factory) as session:
                rows = project_crud.get_all_with_environments(session)
                return {
                    row.id: Project(
                        project_id=row.id,
                        name=row.name,
                        path=row.path,
                        environments={env.key: env.value for env in row.environments},
                    )
                    for row in rows
                }
        except SQLAlchemyError as e:
            logger.error("Failed to select projects", extra={"error": str(e)})
            raise BackendQueryError(
                f"Selecting projects failed: {e}", operation="select_projects"
            ) from e

    def select_templates(self) -> dict[str, Template]:
        """
        Read every template with its stored environment.

        Returns:
            dict[str, Template]: Fresh Template objects keyed by template ID

        Raises:
            BackendQueryError: If the select fails
        """
        try:
            with session_scope(self.session_factory) as session:
                rows = template_crud.get_all_with_environments(session)
                return {
                    row.id: Template(
                        template_id=row.id,
                        name=row.name,
                        environments={env.key: env.value for env in row.environments},
                    )
                    for row in rows
                }
        except SQLAlchemyError as e:
            logger.error("Failed to select templates", extra={"error": str(e)})
            raise BackendQueryError(
                f"Selecting templates failed: {e}", operation="select_templates"
            ) from e
