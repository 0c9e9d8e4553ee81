"""Project data access layer.

Each public method runs in its own connection and transaction. Failures roll
the transaction back and surface as ``DbException`` wrapping the underlying
SQLAlchemy error.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.orm.attributes import set_committed_value

from app.database import DbConnection
from app.exceptions.base import DbException
from models import Project

logger = logging.getLogger(__name__)

T = TypeVar("T")

CHILD_COLLECTIONS = ("materials", "steps", "categories")


class ProjectDao:
    """Reads and writes the project aggregate."""

    def __init__(self, connection: DbConnection):
        self.connection = connection

    def insert_project(self, project: Project) -> Project:
        """Insert the project row and assign the generated ID onto ``project``.

        Only the project's own columns are written; attached materials, steps
        and categories are ignored, as is any ID the record already carries.
        """
        stmt = insert(Project.__table__).values(
            project_name=project.project_name,
            estimated_hours=project.estimated_hours,
            actual_hours=project.actual_hours,
            difficulty=project.difficulty,
            notes=project.notes,
        )

        def _insert(session: Session) -> int:
            return session.execute(stmt).inserted_primary_key[0]

        project.project_id = self._run("insert project", _insert)
        logger.debug("Inserted project %s", project.project_id)
        return project

    def fetch_all_projects(self) -> list[Project]:
        """Return every project ordered by name, with empty child collections."""
        stmt = select(Project).order_by(Project.project_name)

        def _fetch_all(session: Session) -> list[Project]:
            projects = list(session.scalars(stmt).all())
            for project in projects:
                for key in CHILD_COLLECTIONS:
                    set_committed_value(project, key, [])
            return projects

        return self._run("fetch all projects", _fetch_all)

    def fetch_project_by_id(self, project_id: int) -> Project | None:
        """Return the project with its materials, steps and categories, or None.

        The project row and each child collection are read by separate queries
        inside one transaction.
        """
        stmt = (
            select(Project)
            .options(
                selectinload(Project.materials),
                selectinload(Project.steps),
                selectinload(Project.categories),
            )
            .where(Project.project_id == project_id)
        )

        def _fetch_one(session: Session) -> Project | None:
            return session.scalars(stmt).one_or_none()

        return self._run(f"fetch project {project_id}", _fetch_one)

    def modify_project_details(self, project: Project) -> bool:
        """Overwrite the mutable columns; True when exactly one row changed."""
        stmt = (
            update(Project)
            .where(Project.project_id == project.project_id)
            .values(
                project_name=project.project_name,
                estimated_hours=project.estimated_hours,
                actual_hours=project.actual_hours,
                difficulty=project.difficulty,
                notes=project.notes,
            )
            .execution_options(synchronize_session=False)
        )

        def _update(session: Session) -> bool:
            return session.execute(stmt).rowcount == 1

        return self._run(f"modify project {project.project_id}", _update)

    def delete_project(self, project_id: int) -> bool:
        """Delete the project row; the store cascades to its children.

        Returns True when exactly one row was deleted.
        """
        stmt = (
            delete(Project)
            .where(Project.project_id == project_id)
            .execution_options(synchronize_session=False)
        )

        def _delete(session: Session) -> bool:
            return session.execute(stmt).rowcount == 1

        return self._run(f"delete project {project_id}", _delete)

    # Private helper methods
    def _run(self, operation: str, work: Callable[[Session], T]) -> T:
        """Run ``work`` in a single transaction and translate database errors."""
        with self.connection.session() as session:
            with self._transaction(session, operation):
                return work(session)

    @contextmanager
    def _transaction(self, session: Session, operation: str) -> Iterator[None]:
        try:
            with session.begin():
                yield
        except SQLAlchemyError as e:
            # session.begin() has already rolled back by the time we get here
            logger.warning("Rolled back %s: %s", operation, e)
            raise DbException(
                f"Database error during {operation}: {e}",
                details={"operation": operation},
            ) from e
