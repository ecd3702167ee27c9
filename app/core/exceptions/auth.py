"""Authentication and authorization exceptions."""


class AuthException(Exception):
    """Base exception for caller resolution and permission errors."""

    def __init__(self, message: str = "An authentication error occurred"):
        self.message = message
        super().__init__(self.message)


class UnauthenticatedError(AuthException):
    """Raised when no caller identity can be resolved."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InvalidCredentialsError(AuthException):
    """Raised when login credentials do not match."""

    def __init__(self):
        super().__init__("Invalid email or password")


class ForbiddenError(AuthException):
    """Raised when the caller lacks the relationship an operation requires."""

    def __init__(self, message: str = "You are not allowed to perform this action"):
        super().__init__(message)
