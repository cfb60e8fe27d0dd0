"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from easyenv.boundary.db.CRUD import project_crud, template_crud

    with session_scope(SessionFactory) as session:
        projects = project_crud.get_all_with_environments(session)
"""

from easyenv.boundary.db.CRUD.base_crud import BaseCRUD
from easyenv.boundary.db.CRUD.project_crud import ProjectCRUD, project_crud
from easyenv.boundary.db.CRUD.template_crud import TemplateCRUD, template_crud

__all__ = [
    "BaseCRUD",
    "ProjectCRUD",
    "project_crud",
    "TemplateCRUD",
    "template_crud",
]
