"""
Project CRUD operations.

Provides Create, Read, Update, Delete operations for ProjectModel
with eager loading and replacement of environment rows.

Dependencies: sqlalchemy, easyenv.boundary.db.models
System role: Project persistence operations
"""

from typing import Mapping, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from easyenv.boundary.db.CRUD.base_crud import BaseCRUD
from easyenv.boundary.db.models.project_model import ProjectEnvironmentModel, ProjectModel


class ProjectCRUD(BaseCRUD[ProjectModel]):
    """
    CRUD operations for ProjectModel.

    Extends BaseCRUD with eager loading of environment rows and
    whole-set replacement of a project's environment.
    """

    def __init__(self) -> None:
        """Initialize ProjectCRUD with ProjectModel."""
        super().__init__(ProjectModel)

    def get_all_with_environments(self, session: Session) -> Sequence[ProjectModel]:
        """
        Retrieve all projects with eagerly loaded environment rows.

        Args:
            session: Database session

        Returns:
            Sequence of ProjectModels ordered by creation time
        """
        stmt = (
            select(ProjectModel)
            .options(selectinload(ProjectModel.environments))
            .order_by(ProjectModel.created_at, ProjectModel.id)
        )
        result = session.execute(stmt)
        return result.scalars().all()

    def replace_environments(
        self,
        session: Session,
        project_id: str,
        environments: Mapping[str, str],
    ) -> None:
        """
        Replace every environment row of a project.

        Args:
            session: Database session
            project_id: Owning project ID (row must exist)
            environments: Full set of variables to store
        """
        session.execute(
            delete(ProjectEnvironmentModel).where(
                ProjectEnvironmentModel.project_id == project_id
            )
        )
        session.add_all(
            ProjectEnvironmentModel(project_id=project_id, key=key, value=value)
            for key, value in environments.items()
        )
        session.flush()


project_crud = ProjectCRUD()
