"""Time tracking exceptions."""


class TimeEntryException(Exception):
    """Base exception for time tracking errors."""

    def __init__(self, message: str = "A time tracking error occurred"):
        self.message = message
        super().__init__(self.message)


class ActiveTimerExistsError(TimeEntryException):
    """Raised when starting a timer while another one is running."""

    def __init__(self, entry_id: str | None = None):
        super().__init__(
            "You already have an active timer. Please stop it before starting a new one."
        )
        self.entry_id = entry_id


class TimeEntryNotFoundException(TimeEntryException):
    """Raised when no running entry matches the id and caller."""

    def __init__(self, entry_id: str | None = None):
        message = (
            f"Active time entry not found: {entry_id}. It may have already been stopped."
            if entry_id
            else "Active time entry not found"
        )
        super().__init__(message)
