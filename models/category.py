"""
Category model and the project/category join table.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base

# Join rows carry no surrogate key; the pair itself is unique.
project_category = Table(
    "project_category",
    Base.metadata,
    Column(
        "project_id",
        Integer,
        ForeignKey("project.project_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("category.category_id", ondelete="CASCADE"),
        nullable=False,
    ),
    UniqueConstraint("project_id", "category_id"),
)


class Category(Base):
    """A label that can be attached to any number of projects."""

    __tablename__ = "category"

    category_id = Column(Integer, primary_key=True, autoincrement=True)
    category_name = Column(String(128), nullable=False)

    projects = relationship(
        "Project",
        secondary=project_category,
        back_populates="categories",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Category(category_id={self.category_id}, category_name={self.category_name!r})>"
