"""
Template CRUD operations.

Provides Create, Read, Update, Delete operations for TemplateModel
with eager loading and replacement of environment rows.

Dependencies: sqlalchemy, easyenv.boundary.db.models
System role: Template persistence operations
"""

from typing import Mapping, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from easyenv.boundary.db.CRUD.base_crud import BaseCRUD
from easyenv.boundary.db.models.template_model import TemplateEnvironmentModel, TemplateModel


class TemplateCRUD(BaseCRUD[TemplateModel]):
    """CRUD operations for TemplateModel."""

    def __init__(self) -> None:
        """Initialize TemplateCRUD with TemplateModel."""
        super().__init__(TemplateModel)

    def get_all_with_environments(self, session: Session) -> Sequence[TemplateModel]:
        """
        Retrieve all templates with eagerly loaded environment rows.

        Args:
            session: Database session

        Returns:
            Sequence of TemplateModels ordered by creation time
        """
        stmt = (
            select(TemplateModel)
            .options(selectinload(TemplateModel.environments))
            .order_by(TemplateModel.created_at, TemplateModel.id)
        )
        result = session.execute(stmt)
        return result.scalars().all()

    def replace_environments(
        self,
        session: Session,
        template_id: str,
        environments: Mapping[str, str],
    ) -> None:
        """
        Replace every environment row of a template.

        Args:
            session: Database session
            template_id: Owning template ID (row must exist)
            environments: Full set of variables to store
        """
        session.execute(
            delete(TemplateEnvironmentModel).where(
                TemplateEnvironmentModel.template_id == template_id
            )
        )
        session.add_all(
            TemplateEnvironmentModel(template_id=template_id, key=key, value=value)
            for key, value in environments.items()
        )
        session.flush()


template_crud = TemplateCRUD()
