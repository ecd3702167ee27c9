"""Project-specific exceptions."""


class ProjectException(Exception):
    """Base exception for project-related errors."""

    def __init__(self, message: str = "A project error occurred"):
        self.message = message
        super().__init__(self.message)


class ProjectNotFoundException(ProjectException):
    """Raised when a project is not found."""

    def __init__(self, project_id: str | None = None):
        message = f"Project not found: {project_id}" if project_id else "Project not found"
        super().__init__(message)


class ProjectValidationError(ProjectException):
    """Raised when project data validation fails."""

    def __init__(self, message: str = "Project validation failed"):
        super().__init__(message)


class InvalidProjectStateError(ProjectException):
    """Raised when a project is not in the state an operation requires."""

    def __init__(self, current: str, required: str | None = None, action: str | None = None):
        if action and required:
            message = f"Cannot {action}: project is '{current}', expected '{required}'"
        elif action:
            message = f"Cannot {action}: project is '{current}'"
        else:
            message = f"Invalid project state: '{current}'"
        super().__init__(message)
        self.current = current
        self.required = required
