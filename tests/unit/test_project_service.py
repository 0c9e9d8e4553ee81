"""
Unit tests for ProjectService.

The DAO is replaced with a mock so these tests cover only the translation of
DAO results into service outcomes.
"""

from unittest.mock import MagicMock

import pytest

from app.domains.project.dao import ProjectDao
from app.domains.project.service import ProjectService
from app.exceptions.base import DbException
from app.exceptions.project import ProjectNotFoundError
from models import Project


@pytest.fixture
def mock_dao():
    return MagicMock(spec=ProjectDao)


@pytest.fixture
def service(mock_dao):
    return ProjectService(mock_dao)


class TestProjectService:
    """Test cases for ProjectService."""

    def test_add_project_returns_stored_record(self, service, mock_dao):
        project = Project(project_name="Shelf")
        stored = Project(project_id=7, project_name="Shelf")
        mock_dao.insert_project.return_value = stored

        result = service.add_project(project)

        mock_dao.insert_project.assert_called_once_with(project)
        assert result is stored
        assert result.project_id == 7

    def test_fetch_all_projects_passes_list_through(self, service, mock_dao):
        projects = [Project(project_id=2, project_name="Alpha"), Project(project_id=1, project_name="Zeta")]
        mock_dao.fetch_all_projects.return_value = projects

        assert service.fetch_all_projects() is projects

    def test_fetch_all_projects_empty(self, service, mock_dao):
        mock_dao.fetch_all_projects.return_value = []

        assert service.fetch_all_projects() == []

    def test_fetch_project_by_id_found(self, service, mock_dao):
        project = Project(project_id=3, project_name="Deck")
        mock_dao.fetch_project_by_id.return_value = project

        assert service.fetch_project_by_id(3) is project
        mock_dao.fetch_project_by_id.assert_called_once_with(3)

    def test_fetch_project_by_id_missing_raises_not_found(self, service, mock_dao):
        mock_dao.fetch_project_by_id.return_value = None

        with pytest.raises(ProjectNotFoundError) as exc_info:
            service.fetch_project_by_id(99)

        assert exc_info.value.project_id == 99
        assert exc_info.value.status_code == 404
        assert "99" in exc_info.value.message

    def test_modify_project_details_success(self, service, mock_dao):
        project = Project(project_id=4, project_name="Fence")
        mock_dao.modify_project_details.return_value = True

        assert service.modify_project_details(project) is None
        mock_dao.modify_project_details.assert_called_once_with(project)

    def test_modify_project_details_missing_raises_not_found(self, service, mock_dao):
        mock_dao.modify_project_details.return_value = False

        with pytest.raises(ProjectNotFoundError) as exc_info:
            service.modify_project_details(Project(project_id=12, project_name="Ghost"))

        assert exc_info.value.project_id == 12

    def test_delete_project_success(self, service, mock_dao):
        mock_dao.delete_project.return_value = True

        assert service.delete_project(5) is None
        mock_dao.delete_project.assert_called_once_with(5)

    def test_delete_project_missing_raises_not_found(self, service, mock_dao):
        mock_dao.delete_project.return_value = False

        with pytest.raises(ProjectNotFoundError) as exc_info:
            service.delete_project(8)

        assert exc_info.value.details == {"project_id": 8}

    def test_data_access_failure_propagates(self, service, mock_dao):
        mock_dao.fetch_project_by_id.side_effect = DbException("Database error during fetch")

        with pytest.raises(DbException):
            service.fetch_project_by_id(1)
