"""Database failures that are not tied to a marketplace entity."""


class DatabaseException(Exception):
    """Base exception for infrastructure-level database errors."""

    def __init__(self, message: str = "A database error occurred"):
        self.message = message
        super().__init__(self.message)


class DatabaseConnectionError(DatabaseException):
    """The database could not be reached at all."""

    def __init__(self, reason: str | None = None):
        message = "Database is unreachable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DatabaseHealthCheckError(DatabaseException):
    """The database was reachable but the health query failed."""

    def __init__(self, message: str = "Database health check failed"):
        super().__init__(message)
