# tests/conftest.py
import os

# Set up test environment variables BEFORE any other imports
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite:///./test.db")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.core.config import DatabaseSettings
from app.database import DbConnection, get_connection
from app.domains.project.dao import ProjectDao
from app.domains.project.service import ProjectService
from app.main import app
from models import Project, drop_db, project_category
from tests.factories import (
    CategoryFactory,
    MaterialFactory,
    ProjectFactory,
    StepFactory,
)

ALL_FACTORIES = (ProjectFactory, MaterialFactory, StepFactory, CategoryFactory)


@pytest.fixture
def db_connection(tmp_path):
    """Connection provider backed by a fresh SQLite file per test."""
    config = DatabaseSettings(url_override=f"sqlite:///{tmp_path / 'projects.db'}")
    connection = DbConnection(config)
    connection.create_schema()
    yield connection
    with connection.engine.begin() as conn:
        drop_db(conn)
    connection.dispose()


@pytest.fixture
def db_session(db_connection):
    """A session for arranging and inspecting data outside the DAO."""
    with db_connection.session() as session:
        for factory_class in ALL_FACTORIES:
            factory_class._meta.sqlalchemy_session = session
        yield session
        for factory_class in ALL_FACTORIES:
            factory_class._meta.sqlalchemy_session = None


@pytest.fixture
def project_dao(db_connection):
    return ProjectDao(db_connection)


@pytest.fixture
def project_service(project_dao):
    return ProjectService(project_dao)


@pytest.fixture
def client(db_connection):
    """Create a test client wired to the per-test database."""
    app.dependency_overrides[get_connection] = lambda: db_connection
    yield TestClient(app)
    app.dependency_overrides.clear()


# Project fixtures
@pytest.fixture
def new_project():
    """An unsaved project with every column filled in."""
    return Project(
        project_name="Garden Bench",
        estimated_hours=Decimal("6.50"),
        actual_hours=Decimal("8.25"),
        difficulty=2,
        notes="Cedar boards, outdoor screws",
    )


@pytest.fixture
def project_with_children(db_session):
    """A stored project with two materials, two steps and two categories."""
    project = ProjectFactory()
    materials = MaterialFactory.create_batch(2, project_id=project.project_id)
    steps = [
        StepFactory(project_id=project.project_id, step_order=1),
        StepFactory(project_id=project.project_id, step_order=2),
    ]
    categories = CategoryFactory.create_batch(2)
    db_session.execute(
        project_category.insert(),
        [
            {"project_id": project.project_id, "category_id": c.category_id}
            for c in categories
        ],
    )
    db_session.commit()
    return {
        "project": project,
        "materials": materials,
        "steps": steps,
        "categories": categories,
    }
