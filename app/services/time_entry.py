"""Time tracking service."""

import uuid
from datetime import datetime
from typing import Callable, Sequence

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    ActiveTimerExistsError,
    ForbiddenError,
    InvalidProjectStateError,
    ProjectNotFoundException,
    TimeEntryNotFoundException,
)
from app.core.utils.time_utils import floor_minutes, utcnow
from app.db.enums import ProjectStatus, UserRole
from app.db.models.time_entry import TimeEntry
from app.db.models.user import User
from app.db.repositories.project import ProjectRepository
from app.db.repositories.time_entry import TimeEntryRepository


class TimeEntryService:
    """Start/stop timers for freelancers on their assigned projects.

    A freelancer has at most one running timer across all projects. The check
    is a lookup before insert, so two simultaneous starts by the same
    freelancer can still both succeed.
    """

    def __init__(self, session: AsyncSession, clock: Callable[[], datetime] = utcnow):
        self.session = session
        self.repository = TimeEntryRepository(session)
        self.projects = ProjectRepository(session)
        self.clock = clock

    @staticmethod
    def _require_freelancer(caller: User) -> None:
        if not caller.has_role(UserRole.FREELANCER):
            raise ForbiddenError("Only freelancers can track time")

    async def start_timer(
        self,
        caller: User,
        project_id: uuid.UUID,
        description: str | None = None,
    ) -> TimeEntry:
        """Open a new time entry for the caller on a project."""
        self._require_freelancer(caller)

        active = await self.repository.get_active_for_freelancer(caller.id)
        if active is not None:
            raise ActiveTimerExistsError(str(active.id))

        project = await self.projects.get_by_id(project_id)
        if project is None:
            raise ProjectNotFoundException(str(project_id))
        if project.selected_freelancer_id != caller.id:
            raise ForbiddenError("You are not assigned to this project")
        if project.status != ProjectStatus.IN_PROGRESS.value:
            raise InvalidProjectStateError(
                current=project.status,
                required=ProjectStatus.IN_PROGRESS.value,
                action="track time",
            )

        entry = await self.repository.create(
            TimeEntry(
                freelancer_id=caller.id,
                project_id=project.id,
                start_time=self.clock(),
                end_time=None,
                description=description or "",
            )
        )
        await self.session.commit()
        logger.info(f"Timer {entry.id} started by {caller.id} on project {project.id}")
        return entry

    async def stop_timer(self, caller: User, entry_id: uuid.UUID) -> TimeEntry:
        """Close the caller's running entry and record its whole-minute duration.

        Stopping an entry that is already stopped, or that belongs to someone
        else, raises TimeEntryNotFoundException.
        """
        self._require_freelancer(caller)

        entry = await self.repository.get_open_by_id(entry_id, caller.id)
        if entry is None:
            raise TimeEntryNotFoundException(str(entry_id))

        entry.end_time = self.clock()
        entry.duration_minutes = floor_minutes(entry.start_time, entry.end_time)
        entry = await self.repository.update(entry)
        await self.session.commit()
        logger.info(f"Timer {entry.id} stopped after {entry.duration_minutes} minute(s)")
        return entry

    async def list_entries(
        self,
        caller: User,
        project_id: uuid.UUID | None = None,
    ) -> Sequence[TimeEntry]:
        return await self.repository.get_by_freelancer(caller.id, project_id)
