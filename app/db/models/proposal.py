"""Proposal model."""

import uuid

from sqlalchemy import Float, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, TimestampedMixin
from app.db.enums import ProposalStatus


class Proposal(TimestampedMixin, Base):
    """A freelancer's bid on a project."""

    __tablename__ = "proposals"

    project_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("projects.id"),
        nullable=False,
        index=True,
    )
    freelancer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    cover_letter: Mapped[str] = mapped_column(Text, nullable=False)
    proposed_budget: Mapped[float] = mapped_column(Float, nullable=False)
    timeline: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=ProposalStatus.PENDING.value,
    )
