"""
Sample data for a freshly created projects schema.
"""

from decimal import Decimal

from sqlalchemy.orm import Session

from .category import Category
from .material import Material
from .project import Project
from .step import Step


def load_sample_data(session: Session) -> Project:
    """Add the "Door Hangers" sample project to ``session`` and flush it.

    The caller owns the transaction; nothing is committed here.
    """
    project = Project(
        project_name="Door Hangers",
        estimated_hours=Decimal("4.00"),
        actual_hours=Decimal("3.00"),
        difficulty=3,
        notes="Hang the door using hinges from Home Depot",
    )
    project.materials = [
        Material(material_name="2-inch screws", num_required=20),
        Material(material_name="Hollow core door", num_required=1),
    ]
    project.steps = [
        Step(
            step_text="Screw door hangers on the top and bottom of each side of the door frame",
            step_order=1,
        ),
        Step(
            step_text="Screw door hangers on the top and bottom of each side of the door",
            step_order=2,
        ),
    ]
    project.categories = [
        Category(category_name="Doors and Windows"),
        Category(category_name="Repairs"),
    ]

    session.add(project)
    session.flush()
    return project
