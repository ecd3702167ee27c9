"""User-specific exceptions."""


class UserException(Exception):
    """Base exception for user-related errors."""

    def __init__(self, message: str = "A user error occurred"):
        self.message = message
        super().__init__(self.message)


class UserNotFoundException(UserException):
    """Raised when a user is not found."""

    def __init__(self, user_id: str | None = None):
        message = f"User not found: {user_id}" if user_id else "User not found"
        super().__init__(message)


class UserAlreadyExistsError(UserException):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(f"User already exists with email: {email}")
        self.email = email
