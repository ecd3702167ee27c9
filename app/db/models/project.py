"""Project model."""

import uuid

from sqlalchemy import JSON, Float, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, TimestampedMixin
from app.db.enums import ProjectStatus


class Project(TimestampedMixin, Base):
    """A job posted by a client.

    ``selected_freelancer_id`` is set exactly when the project has left
    ``open``; both fields are only changed by the lifecycle services.
    """

    __tablename__ = "projects"

    client_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    budget: Mapped[float] = mapped_column(Float, nullable=False)
    timeline: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=ProjectStatus.OPEN.value,
        index=True,
    )
    requirements: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    selected_freelancer_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=True,
        index=True,
    )
