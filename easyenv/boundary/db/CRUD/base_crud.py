"""
Base CRUD operations for SQLAlchemy models.

Provides the generic write operations that model-specific CRUD classes
inherit: plain insert and insert-or-update by primary key.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from easyenv.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Works with any SQLAlchemy model keyed by a string ``id`` column.
    Subclasses specify the model class and add model-specific queries.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    def create(self, session: Session, **kwargs: Any) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        session.add(instance)
        session.flush()
        session.refresh(instance)
        return instance

    def upsert(self, session: Session, id: str, **kwargs: Any) -> ModelT:
        """
        Insert a record with the given ID or update the existing one.

        Args:
            session: Database session
            id: Primary key to insert or update
            **kwargs: Field values

        Returns:
            The inserted or updated model instance
        """
        instance = session.get(self.model, id)
        if instance is None:
            return self.create(session, id=id, **kwargs)

        for field, value in kwargs.items():
            setattr(instance, field, value)
        session.flush()
        return instance
