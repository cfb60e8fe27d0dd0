"""
ORM models for the EasyEnv schema.
"""

from easyenv.boundary.db.models.project_model import ProjectEnvironmentModel, ProjectModel
from easyenv.boundary.db.models.template_model import TemplateEnvironmentModel, TemplateModel

__all__ = [
    "ProjectModel",
    "ProjectEnvironmentModel",
    "TemplateModel",
    "TemplateEnvironmentModel",
]
