"""Project schemas for request/response serialization."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field, field_validator

from models import Project

from .base import BaseSchema

__all__ = [
    "ProjectBase",
    "ProjectCreate",
    "ProjectUpdate",
    "MaterialResponse",
    "StepResponse",
    "CategoryResponse",
    "ProjectResponse",
    "ProjectDetailResponse",
]


class ProjectBase(BaseSchema):
    """Base project schema with the mutable project columns."""

    project_name: str = Field(..., min_length=1, max_length=128)
    estimated_hours: Decimal | None = Field(None, ge=0, max_digits=7, decimal_places=2)
    actual_hours: Decimal | None = Field(None, ge=0, max_digits=7, decimal_places=2)
    difficulty: int | None = Field(None, ge=1, le=5)
    notes: str | None = None

    @field_validator("project_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate and clean the project name."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("Project name cannot be empty or only whitespace")
        return v


class ProjectCreate(ProjectBase):
    """Schema for creating a new project."""

    def to_model(self) -> Project:
        return Project(**self.model_dump())


class ProjectUpdate(ProjectBase):
    """Schema for replacing every mutable field of a project."""

    def to_model(self, project_id: int) -> Project:
        return Project(project_id=project_id, **self.model_dump())


class MaterialResponse(BaseSchema):
    material_id: int
    project_id: int
    material_name: str
    num_required: int | None = None
    cost: Decimal | None = None


class StepResponse(BaseSchema):
    step_id: int
    project_id: int
    step_text: str
    step_order: int


class CategoryResponse(BaseSchema):
    category_id: int
    category_name: str


class ProjectResponse(BaseSchema):
    """Schema for a bare project row."""

    project_id: int
    project_name: str
    estimated_hours: Decimal | None = None
    actual_hours: Decimal | None = None
    difficulty: int | None = None
    notes: str | None = None


class ProjectDetailResponse(ProjectResponse):
    """Schema for a project with its materials, steps and categories."""

    materials: list[MaterialResponse] = []
    steps: list[StepResponse] = []
    categories: list[CategoryResponse] = []
