"""Project service layer with business logic."""

import logging

from app.domains.project.dao import ProjectDao
from app.exceptions.project import ProjectNotFoundError
from models import Project

logger = logging.getLogger(__name__)


class ProjectService:
    """Service class for project business logic."""

    def __init__(self, dao: ProjectDao):
        self.dao = dao

    def add_project(self, project: Project) -> Project:
        """Store a new project and return it with its ID populated."""
        return self.dao.insert_project(project)

    def fetch_all_projects(self) -> list[Project]:
        """Return all projects ordered by name."""
        return self.dao.fetch_all_projects()

    def fetch_project_by_id(self, project_id: int) -> Project:
        """Return the full project aggregate or raise ProjectNotFoundError."""
        project = self.dao.fetch_project_by_id(project_id)
        if project is None:
            logger.info("Project %s not found", project_id)
            raise ProjectNotFoundError(project_id)
        return project

    def modify_project_details(self, project: Project) -> None:
        if not self.dao.modify_project_details(project):
            logger.info("Project %s not found for update", project.project_id)
            raise ProjectNotFoundError(project.project_id)

    def delete_project(self, project_id: int) -> None:
        if not self.dao.delete_project(project_id):
            logger.info("Project %s not found for delete", project_id)
            raise ProjectNotFoundError(project_id)
