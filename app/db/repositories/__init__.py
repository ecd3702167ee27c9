"""Database repositories."""

from app.db.repositories.message import MessageRepository
from app.db.repositories.notification import NotificationRepository
from app.db.repositories.project import ProjectFilter, ProjectRepository
from app.db.repositories.proposal import ProposalRepository
from app.db.repositories.review import ReviewRepository
from app.db.repositories.time_entry import TimeEntryRepository
from app.db.repositories.user import UserRepository

__all__ = [
    "MessageRepository",
    "NotificationRepository",
    "ProjectFilter",
    "ProjectRepository",
    "ProposalRepository",
    "ReviewRepository",
    "TimeEntryRepository",
    "UserRepository",
]
