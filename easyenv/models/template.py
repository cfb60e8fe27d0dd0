"""
Template domain model.

Dependencies: pydantic
System role: Reusable environment set, database-only (no file export)
"""

from pydantic import BaseModel, Field

from easyenv.models.common import new_id
from easyenv.models.environment import Environment, validate_key


class Template(BaseModel):
    """
    Named, project-independent set of environment variables.

    Attributes:
        template_id: Identifier generated at creation, never reassigned
        name: Display name
        environments: Variable name to value mapping
    """

    template_id: str = Field(default_factory=new_id, frozen=True, min_length=1)
    name: str
    environments: dict[str, str] = Field(default_factory=dict)

    def add_environment(self, key: str, value: str) -> None:
        """
        Insert a variable, overwriting any existing value for the key.

        Keys follow the project rules so the template can be copied into
        any project.

        Raises:
            ValueError: If the key cannot be stored in an environment file
        """
        self.environments[validate_key(key)] = value

    def get_environments(self) -> list[Environment]:
        """Return the variables as key/value entries in insertion order."""
        return [
            Environment(key=key, value=value)
            for key, value in self.environments.items()
        ]
