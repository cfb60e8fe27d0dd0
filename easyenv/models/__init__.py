"""
Domain entities for EasyEnv.

Exports:
  - Environment: Single key/value variable
  - Project: Named environment set exported to a file
  - Template: Reusable environment set stored in the database only
"""

from easyenv.models.common import new_id
from easyenv.models.environment import Environment
from easyenv.models.project import Project
from easyenv.models.template import Template

__all__ = [
    "Environment",
    "Project",
    "Template",
    "new_id",
]
