"""
Step model: one instruction in a project's ordered walkthrough.
"""

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from .base import Base


class Step(Base):
    __tablename__ = "step"

    step_id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(
        Integer, ForeignKey("project.project_id", ondelete="CASCADE"), nullable=False
    )
    step_text = Column(Text, nullable=False)
    step_order = Column(Integer, nullable=False)  # 1-based position

    # Relationships
    project = relationship("Project", back_populates="steps")

    def __repr__(self) -> str:
        return f"<Step(step_id={self.step_id}, step_order={self.step_order})>"
