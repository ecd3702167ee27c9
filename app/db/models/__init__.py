"""Database models."""

from app.db.models.message import Message
from app.db.models.notification import Notification
from app.db.models.project import Project
from app.db.models.proposal import Proposal
from app.db.models.review import Review
from app.db.models.time_entry import TimeEntry
from app.db.models.user import User

__all__ = ["Message", "Notification", "Project", "Proposal", "Review", "TimeEntry", "User"]
