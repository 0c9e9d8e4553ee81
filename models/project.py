"""
Project model, the root of the DIY project aggregate.
"""

from sqlalchemy import Column, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from .base import Base
from .category import project_category


class Project(Base):
    """
    Represents a single do-it-yourself project.

    Child collections never lazy load; callers that need the full aggregate
    request the collections explicitly with loader options, and touching an
    unloaded collection on a stored project raises.
    """

    __tablename__ = "project"

    project_id = Column(Integer, primary_key=True, autoincrement=True)
    project_name = Column(String(128), nullable=False)
    estimated_hours = Column(Numeric(7, 2))
    actual_hours = Column(Numeric(7, 2))
    difficulty = Column(Integer)
    notes = Column(Text)

    # Relationships
    materials = relationship(
        "Material",
        back_populates="project",
        lazy="raise",
        passive_deletes=True,
        order_by="Material.material_id",
    )
    steps = relationship(
        "Step",
        back_populates="project",
        lazy="raise",
        passive_deletes=True,
        order_by="Step.step_order",
    )
    categories = relationship(
        "Category",
        secondary=project_category,
        back_populates="projects",
        lazy="raise",
        passive_deletes=True,
        order_by="Category.category_id",
    )

    def __repr__(self) -> str:
        return f"<Project(project_id={self.project_id}, project_name={self.project_name!r})>"
