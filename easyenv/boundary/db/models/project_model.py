"""
Project ORM models.

Represents a project row and its environment variable rows.

Dependencies: sqlalchemy, easyenv.boundary.db.base
System role: Project persistence
"""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from easyenv.boundary.db.base import Base, StringIDMixin, TimestampMixin


class ProjectModel(Base, StringIDMixin, TimestampMixin):
    """
    Project ORM model.

    Attributes:
        id: Project ID (same value as Project.project_id)
        name: Project name (255 char limit)
        path: Filesystem path the project refers to
        environments: ProjectEnvironmentModel rows (cascading delete)
        created_at: Row creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Project name",
    )

    path: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        doc="Filesystem path of the project",
    )

    # Relationships
    environments = relationship(
        "ProjectEnvironmentModel",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ProjectEnvironmentModel(Base):
    """
    One environment variable belonging to a project.

    Primary key is (project_id, key), so a project holds each key once.
    """

    __tablename__ = "project_environments"

    project_id: Mapped[str] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        primary_key=True,
    )
    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")

    project = relationship("ProjectModel", back_populates="environments")
