"""Messaging exceptions."""


class MessageException(Exception):
    """Base exception for messaging errors."""

    def __init__(self, message: str = "A messaging error occurred"):
        self.message = message
        super().__init__(self.message)


class MessageValidationError(MessageException):
    """Raised when a message has neither content nor attachments."""

    def __init__(self, message: str = "Message must have content or attachments"):
        super().__init__(message)
