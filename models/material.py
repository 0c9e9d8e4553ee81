"""
Material model: something a project needs to buy or gather.
"""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


class Material(Base):
    __tablename__ = "material"

    material_id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(
        Integer, ForeignKey("project.project_id", ondelete="CASCADE"), nullable=False
    )
    material_name = Column(String(128), nullable=False)
    num_required = Column(Integer)
    cost = Column(Numeric(7, 2))

    # Relationships
    project = relationship("Project", back_populates="materials")

    def __repr__(self) -> str:
        return f"<Material(material_id={self.material_id}, material_name={self.material_name!r})>"
