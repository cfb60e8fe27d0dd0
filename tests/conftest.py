"""
Shared test fixtures and configuration for entire test suite.

Provides: temporary directories, settings pointed at them, an EasyEnv
session, and a schema-initialized SQLite engine with session factory
Dependencies: pytest, sqlalchemy
System role: Test infrastructure and fixture management
"""

import shutil
import tempfile
import uuid
from pathlib import Path

import pytest

from easyenv.boundary.db.connection import get_session_factory, open_engine
from easyenv.boundary.db.create_tables import create_all_tables
from easyenv.boundary.env_file import EnvFileExporter
from easyenv.configs.database import DatabaseSettings
from easyenv.configs.env_files import EnvFileSettings
from easyenv.configs.settings import Settings
from easyenv.core.session_manager import EasyEnv


@pytest.fixture
def temp_dir():
    """
    Create a temporary directory for test files.

    Yields:
        Path: Path to temporary directory
    """
    temp_path = Path(tempfile.mkdtemp(prefix="easyenv_test_"))
    yield temp_path

    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def env_dir(temp_dir: Path) -> Path:
    """Directory receiving exported project environment files."""
    return temp_dir / "environments"


@pytest.fixture
def settings(env_dir: Path) -> Settings:
    """Settings with environment files redirected into the temp directory."""
    return Settings(
        database=DatabaseSettings(echo_sql=False, foreign_keys=True),
        env_files=EnvFileSettings(env_dir=env_dir),
    )


@pytest.fixture
def exporter(settings: Settings) -> EnvFileExporter:
    """Exporter writing into the temp environment directory."""
    return EnvFileExporter.from_settings(settings.env_files)


@pytest.fixture
def easy(settings: Settings, exporter: EnvFileExporter):
    """
    Provide an EasyEnv session that closes its databases on teardown.

    Yields:
        EasyEnv: Session with no databases loaded
    """
    session = EasyEnv(settings=settings, exporter=exporter)
    yield session
    session.close_all()


@pytest.fixture
def db_path(temp_dir: Path) -> Path:
    """Path for a database file that does not exist yet."""
    return temp_dir / "envs.db"


@pytest.fixture
def engine(temp_dir: Path, settings: Settings):
    """
    Create a SQLite database with all tables for CRUD tests.

    Yields:
        Engine: Engine bound to a fresh database file
    """
    test_engine = open_engine(str(temp_dir / "crud.db"), settings.database)
    create_all_tables(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def db_session(engine):
    """
    Provide a database session for CRUD tests.

    Yields:
        Session: Session rolled back and closed after the test
    """
    SessionFactory = get_session_factory(engine)
    session = SessionFactory()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def project_id() -> str:
    """Generate a test project ID."""
    return str(uuid.uuid4())


@pytest.fixture
def template_id() -> str:
    """Generate a test template ID."""
    return str(uuid.uuid4())
