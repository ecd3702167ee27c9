"""Core exceptions for the application."""

from app.core.exceptions.auth import (
    AuthException,
    ForbiddenError,
    InvalidCredentialsError,
    UnauthenticatedError,
)
from app.core.exceptions.db_exceptions import (
    DatabaseConnectionError,
    DatabaseException,
    DatabaseHealthCheckError,
)
from app.core.exceptions.message import MessageException, MessageValidationError
from app.core.exceptions.notification import (
    NotificationException,
    NotificationNotFoundException,
)
from app.core.exceptions.payment import (
    PaymentException,
    PaymentNotConfiguredError,
    PaymentProviderError,
)
from app.core.exceptions.project import (
    InvalidProjectStateError,
    ProjectException,
    ProjectNotFoundException,
    ProjectValidationError,
)
from app.core.exceptions.proposal import (
    InvalidProposalStateError,
    ProposalException,
    ProposalNotFoundException,
)
from app.core.exceptions.review import (
    DuplicateReviewError,
    ReviewException,
    ReviewValidationError,
)
from app.core.exceptions.time_entry import (
    ActiveTimerExistsError,
    TimeEntryException,
    TimeEntryNotFoundException,
)
from app.core.exceptions.user import (
    UserAlreadyExistsError,
    UserException,
    UserNotFoundException,
)

__all__ = [
    # Auth
    "AuthException",
    "UnauthenticatedError",
    "InvalidCredentialsError",
    "ForbiddenError",
    # Database
    "DatabaseException",
    "DatabaseConnectionError",
    "DatabaseHealthCheckError",
    # Message
    "MessageException",
    "MessageValidationError",
    # Notification
    "NotificationException",
    "NotificationNotFoundException",
    # Payment
    "PaymentException",
    "PaymentNotConfiguredError",
    "PaymentProviderError",
    # Project
    "ProjectException",
    "ProjectNotFoundException",
    "ProjectValidationError",
    "InvalidProjectStateError",
    # Proposal
    "ProposalException",
    "ProposalNotFoundException",
    "InvalidProposalStateError",
    # Review
    "ReviewException",
    "DuplicateReviewError",
    "ReviewValidationError",
    # Time entry
    "TimeEntryException",
    "ActiveTimerExistsError",
    "TimeEntryNotFoundException",
    # User
    "UserException",
    "UserNotFoundException",
    "UserAlreadyExistsError",
]
