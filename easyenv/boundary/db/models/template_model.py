"""
Template ORM models.

Represents a template row and its environment variable rows.

Dependencies: sqlalchemy, easyenv.boundary.db.base
System role: Template persistence
"""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from easyenv.boundary.db.base import Base, StringIDMixin, TimestampMixin


class TemplateModel(Base, StringIDMixin, TimestampMixin):
    """
    Template ORM model.

    Templates are independent of projects; deleting one never touches
    project rows.

    Attributes:
        id: Template ID (same value as Template.template_id)
        name: Template name (255 char limit)
        environments: TemplateEnvironmentModel rows (cascading delete)
    """

    __tablename__ = "templates"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Template name",
    )

    # Relationships
    environments = relationship(
        "TemplateEnvironmentModel",
        back_populates="template",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class TemplateEnvironmentModel(Base):
    """One environment variable belonging to a template."""

    __tablename__ = "template_environments"

    template_id: Mapped[str] = mapped_column(
        ForeignKey("templates.id", ondelete="CASCADE"),
        primary_key=True,
    )
    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")

    template = relationship("TemplateModel", back_populates="environments")
