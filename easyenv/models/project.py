"""
Project domain model.

A project owns a mutable set of environment variables and a stable
identifier. Its variables are exported to, and imported from, a file
keyed by that identifier.

Dependencies: pydantic
System role: Project entity held in a connection's cache
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from easyenv.models.common import new_id
from easyenv.models.environment import validate_key

if TYPE_CHECKING:
    from easyenv.boundary.env_file import EnvFileExporter


class Project(BaseModel):
    """
    Named unit of work with its own environment variables.

    Attributes:
        project_id: Identifier generated at creation, never reassigned
        name: Display name
        path: Filesystem location the project refers to
        environments: Variable name to value mapping
    """

    project_id: str = Field(default_factory=new_id, frozen=True, min_length=1)
    name: str
    path: str
    environments: dict[str, str] = Field(default_factory=dict)

    def add_environment(self, key: str, value: str) -> None:
        """
        Insert a variable, overwriting any existing value for the key.

        Raises:
            ValueError: If the key cannot be stored in an environment file
        """
        self.environments[validate_key(key)] = value

    def get_environment(self, key: str) -> str | None:
        return self.environments.get(key)

    def save_environments_to_file(self, exporter: "EnvFileExporter") -> None:
        """
        Export the current variables, fully overwriting the project's file.

        Raises:
            FileWriteError: If the exporter cannot write the file
        """
        exporter.write(self.project_id, self.environments)

    def load_environments_from_file(self, exporter: "EnvFileExporter") -> None:
        """
        Replace the in-memory variables with the file contents.

        Unsaved in-memory edits are discarded.

        Raises:
            FileReadError: If the exporter cannot read the file
        """
        self.environments = dict(exporter.read(self.project_id))
