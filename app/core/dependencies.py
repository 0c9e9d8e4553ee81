# app/core/dependencies.py
import logging

from fastapi import Depends

from app.database import DbConnection, get_connection
from app.domains.project.dao import ProjectDao
from app.domains.project.service import ProjectService

logger = logging.getLogger(__name__)


def get_project_dao(connection: DbConnection = Depends(get_connection)) -> ProjectDao:
    """Build the project DAO around the configured connection provider."""
    return ProjectDao(connection)


def get_project_service(dao: ProjectDao = Depends(get_project_dao)) -> ProjectService:
    """Build the project service for a request."""
    return ProjectService(dao)
