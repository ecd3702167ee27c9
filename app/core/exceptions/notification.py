"""Notification-specific exceptions."""


class NotificationException(Exception):
    """Base exception for notification errors."""

    def __init__(self, message: str = "A notification error occurred"):
        self.message = message
        super().__init__(self.message)


class NotificationNotFoundException(NotificationException):
    """Raised when a notification does not exist or belongs to someone else."""

    def __init__(self, notification_id: str | None = None):
        message = (
            f"Notification not found: {notification_id}" if notification_id else "Notification not found"
        )
        super().__init__(message)
