"""Project-related exceptions."""

from .base import NotFoundError


class ProjectNotFoundError(NotFoundError):
    """Raised when no project exists for the requested ID."""

    def __init__(self, project_id: int | None):
        self.project_id = project_id
        super().__init__(
            message=f"Project with ID={project_id} does not exist.",
            error_code="PROJECT_NOT_FOUND",
            details={"project_id": project_id},
        )
