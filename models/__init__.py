"""
Models package initialization.
"""

from .base import Base, drop_db, init_db
from .category import Category, project_category
from .material import Material
from .project import Project
from .step import Step

__all__ = [
    "Base",
    "init_db",
    "drop_db",
    "Project",
    "Material",
    "Step",
    "Category",
    "project_category",
]
