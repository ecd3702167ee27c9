"""Review-specific exceptions."""


class ReviewException(Exception):
    """Base exception for review errors."""

    def __init__(self, message: str = "A review error occurred"):
        self.message = message
        super().__init__(self.message)


class DuplicateReviewError(ReviewException):
    """Raised when the (project, reviewer, reviewee) review already exists."""

    def __init__(self):
        super().__init__("You have already reviewed this user for this project")


class ReviewValidationError(ReviewException):
    """Raised when review data validation fails."""

    def __init__(self, message: str = "Review validation failed"):
        super().__init__(message)
