"""
Test suite for BaseCRUD generic database operations.

Tests create and upsert against a real SQLite file with all tables.

System role: Verification of generic database layer foundation
"""

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from easyenv.boundary.db.CRUD.base_crud import BaseCRUD
from easyenv.boundary.db.models.template_model import TemplateModel


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(TemplateModel)


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    def test_create_should_persist_with_given_id(
        self, base_crud: BaseCRUD, db_session: Session, template_id: str
    ) -> None:
        """Test create inserts a row and fills timestamps."""
        # Act
        instance = base_crud.create(db_session, id=template_id, name="defaults")

        # Assert
        assert instance.id == template_id
        assert instance.created_at is not None
        assert instance.updated_at is not None

    def test_create_should_generate_id_when_missing(
        self, base_crud: BaseCRUD, db_session: Session
    ) -> None:
        """Test the mixin default supplies an ID."""
        instance = base_crud.create(db_session, name="defaults")

        assert isinstance(instance.id, str)
        assert len(instance.id) == 36


class TestBaseCRUDUpsert:
    """Test suite for BaseCRUD.upsert() method."""

    def test_upsert_should_insert_new_row(
        self, base_crud: BaseCRUD, db_session: Session, template_id: str
    ) -> None:
        """Test upsert inserts when the ID is unknown."""
        instance = base_crud.upsert(db_session, template_id, name="defaults")

        assert instance.id == template_id
        assert db_session.get(TemplateModel, template_id) is not None

    def test_upsert_should_update_existing_row(
        self, base_crud: BaseCRUD, db_session: Session, template_id: str
    ) -> None:
        """Test upsert keeps one row and changes its fields."""
        # Arrange
        base_crud.create(db_session, id=template_id, name="old")

        # Act
        base_crud.upsert(db_session, template_id, name="new")

        # Assert
        rows = db_session.execute(select(TemplateModel)).scalars().all()
        assert len(rows) == 1
        assert rows[0].name == "new"
