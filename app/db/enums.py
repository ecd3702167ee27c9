"""Database enums."""

from enum import Enum


class UserRole(str, Enum):
    """Marketplace roles."""

    CLIENT = "client"
    FREELANCER = "freelancer"
    ADMIN = "admin"


class UserStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


class ProjectStatus(str, Enum):
    """Project lifecycle: open -> in-progress -> completed."""

    OPEN = "open"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class ProposalStatus(str, Enum):
    """Proposal lifecycle: pending -> accepted | rejected."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class NotificationType(str, Enum):
    """Kinds of inbox notifications."""

    PROPOSAL_RECEIVED = "proposal_received"
    PROPOSAL_ACCEPTED = "proposal_accepted"
    PROPOSAL_REJECTED = "proposal_rejected"
    PAYMENT_RECEIVED = "payment_received"
    PROJECT_COMPLETED = "project_completed"
    MESSAGE_RECEIVED = "message_received"
    ADMIN_NOTICE = "admin_notice"


class ReviewType(str, Enum):
    CLIENT_TO_FREELANCER = "client-to-freelancer"
    FREELANCER_TO_CLIENT = "freelancer-to-client"
