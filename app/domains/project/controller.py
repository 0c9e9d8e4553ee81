"""Project API controller with FastAPI endpoints."""

import logging

from fastapi import APIRouter, Body, Depends, Path

from app.core.dependencies import get_project_service
from app.domains.project.service import ProjectService
from app.schemas.base import ResponseSchema
from app.schemas.project import (
    ProjectCreate,
    ProjectDetailResponse,
    ProjectResponse,
    ProjectUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/projects",
    tags=["projects"],
)


@router.post("/", response_model=ResponseSchema, status_code=201)
def create_project(
    project_data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
):
    """Create a new project."""

    project = service.add_project(project_data.to_model())
    logger.info("Created project %s", project.project_id)

    return ResponseSchema(
        status="success",
        message="Project created successfully",
        data=ProjectResponse.model_validate(project).model_dump(),
    )


@router.get("/", response_model=ResponseSchema)
def get_projects(service: ProjectService = Depends(get_project_service)):
    """List every project ordered by name."""

    projects = service.fetch_all_projects()

    return ResponseSchema(
        status="success",
        message="Projects retrieved successfully",
        data=[ProjectResponse.model_validate(p).model_dump() for p in projects],
    )


@router.get("/{project_id}", response_model=ResponseSchema)
def get_project(
    project_id: int = Path(..., description="Project ID"),
    service: ProjectService = Depends(get_project_service),
):
    """Get a project with its materials, steps and categories."""

    project = service.fetch_project_by_id(project_id)

    return ResponseSchema(
        status="success",
        message="Project retrieved successfully",
        data=ProjectDetailResponse.model_validate(project).model_dump(),
    )


@router.put("/{project_id}", response_model=ResponseSchema)
def update_project(
    project_id: int = Path(..., description="Project ID"),
    project_data: ProjectUpdate = Body(...),
    service: ProjectService = Depends(get_project_service),
):
    """Replace the details of a project."""

    project = project_data.to_model(project_id)
    service.modify_project_details(project)
    logger.info("Updated project %s", project_id)

    return ResponseSchema(
        status="success",
        message="Project updated successfully",
        data=ProjectResponse.model_validate(project).model_dump(),
    )


@router.delete("/{project_id}", response_model=ResponseSchema)
def delete_project(
    project_id: int = Path(..., description="Project ID"),
    service: ProjectService = Depends(get_project_service),
):
    """Delete a project together with its materials, steps and category links."""

    service.delete_project(project_id)
    logger.info("Deleted project %s", project_id)

    return ResponseSchema(status="success", message="Project deleted successfully", data=None)
