"""TimeEntry repository for database operations."""

import uuid
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.time_entry import TimeEntry


class TimeEntryRepository:
    """Repository for TimeEntry CRUD operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: TimeEntry) -> TimeEntry:
        """Create a new time entry."""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def get_active_for_freelancer(self, freelancer_id: uuid.UUID) -> TimeEntry | None:
        """Get the freelancer's running entry on any project, if there is one."""
        result = await self.session.execute(
            select(TimeEntry)
            .where(
                TimeEntry.freelancer_id == freelancer_id,
                TimeEntry.end_time.is_(None),
            )
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_open_by_id(
        self,
        entry_id: uuid.UUID,
        freelancer_id: uuid.UUID,
    ) -> TimeEntry | None:
        """Get a running entry by ID, only if it belongs to the freelancer."""
        result = await self.session.execute(
            select(TimeEntry).where(
                TimeEntry.id == entry_id,
                TimeEntry.freelancer_id == freelancer_id,
                TimeEntry.end_time.is_(None),
            )
        )
        return result.scalar_one_or_none()

    async def get_by_freelancer(
        self,
        freelancer_id: uuid.UUID,
        project_id: uuid.UUID | None = None,
    ) -> Sequence[TimeEntry]:
        """Get a freelancer's entries, optionally for one project, newest first."""
        stmt = select(TimeEntry).where(TimeEntry.freelancer_id == freelancer_id)
        if project_id is not None:
            stmt = stmt.where(TimeEntry.project_id == project_id)
        result = await self.session.execute(stmt.order_by(TimeEntry.created_at.desc()))
        return result.scalars().all()

    async def update(self, entry: TimeEntry) -> TimeEntry:
        """Update an existing time entry."""
        await self.session.flush()
        await self.session.refresh(entry)
        return entry
