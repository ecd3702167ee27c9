"""Project service for business logic."""

import math
import uuid
from dataclasses import dataclass
from typing import Sequence

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    ForbiddenError,
    InvalidProjectStateError,
    ProjectNotFoundException,
    ProjectValidationError,
)
from app.db.enums import NotificationType, ProjectStatus, UserRole
from app.db.models.project import Project
from app.db.models.user import User
from app.db.repositories.project import ProjectFilter, ProjectRepository
from app.services.notification import NotificationSink
from app.services.user import UserService, normalize_tags

ASSIGNED_STATUSES = [ProjectStatus.IN_PROGRESS.value, ProjectStatus.COMPLETED.value]


def project_url(project_id: uuid.UUID) -> str:
    """Client-side link to a project page, used as notification action URL."""
    return f"/project/{project_id}"


@dataclass
class ProjectPage:
    """One page of search results."""

    items: Sequence[Project]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


class ProjectService:
    """Service layer for Project operations."""

    def __init__(self, session: AsyncSession, sink: NotificationSink | None = None):
        self.session = session
        self.repository = ProjectRepository(session)
        self.sink = sink or NotificationSink()

    async def create_project(
        self,
        caller: User,
        title: str,
        description: str,
        category: str,
        budget: float,
        timeline: str,
        requirements: list[str] | None = None,
    ) -> Project:
        """Post a new open project owned by the calling client."""
        if not caller.has_role(UserRole.CLIENT):
            raise ForbiddenError("Only clients can post projects")
        if budget <= 0:
            raise ProjectValidationError("Budget must be greater than zero")

        project = await self.repository.create(
            Project(
                client_id=caller.id,
                title=title,
                description=description,
                category=category,
                budget=budget,
                timeline=timeline,
                status=ProjectStatus.OPEN.value,
                requirements=normalize_tags(requirements),
                selected_freelancer_id=None,
            )
        )
        await self.session.commit()
        logger.info(f"Project {project.id} created by client {caller.id}")
        return project

    async def get_project(self, project_id: uuid.UUID) -> Project:
        """Get project by ID."""
        project = await self.repository.get_by_id(project_id)
        if project is None:
            raise ProjectNotFoundException(str(project_id))
        return project

    async def search_projects(
        self,
        q: str | None = None,
        category: str | None = None,
        min_budget: float | None = None,
        max_budget: float | None = None,
        status: str | None = None,
        skills: list[str] | None = None,
        sort_by: str = "created_at",
        sort_order: str = "desc",
        page: int = 1,
        limit: int = 20,
    ) -> ProjectPage:
        """Search the public listing. Only open projects unless a status (or "all") is given."""
        if status is None:
            statuses = [ProjectStatus.OPEN.value]
        elif status == "all":
            statuses = None
        else:
            statuses = [ProjectStatus(status).value]

        if min_budget is not None and max_budget is not None and min_budget > max_budget:
            raise ProjectValidationError("min_budget cannot exceed max_budget")

        criteria = ProjectFilter(
            q=q,
            category=category if category and category != "all" else None,
            min_budget=min_budget,
            max_budget=max_budget,
            statuses=statuses,
            skills=normalize_tags(skills),
        )
        items, total = await self.repository.search(
            criteria,
            sort_by=sort_by,
            descending=sort_order != "asc",
            offset=(page - 1) * limit,
            limit=limit,
        )
        logger.debug(f"Project search matched {total} project(s)")
        return ProjectPage(items=items, page=page, limit=limit, total=total)

    async def my_projects(self, caller: User, status: str | None = None) -> Sequence[Project]:
        """Projects a client owns, or projects a freelancer is assigned to."""
        statuses = [ProjectStatus(status).value] if status and status != "all" else None

        if caller.has_role(UserRole.FREELANCER):
            return await self.repository.get_by_freelancer(
                caller.id, statuses or ASSIGNED_STATUSES
            )
        return await self.repository.get_by_client(caller.id, statuses)

    async def list_all(self, caller: User) -> Sequence[Project]:
        """Every project, for administrators."""
        UserService.require_admin(caller)
        return await self.repository.get_all()

    async def update_status(
        self,
        caller: User,
        project_id: uuid.UUID,
        status: ProjectStatus,
    ) -> Project:
        """Let the assigned freelancer move an in-progress project to completed.

        ``completed`` is terminal; any other requested transition raises
        InvalidProjectStateError and leaves the project unchanged.
        """
        project = await self.get_project(project_id)

        if project.selected_freelancer_id != caller.id:
            raise ForbiddenError("You are not authorized to update this project")

        if (
            status != ProjectStatus.COMPLETED
            or project.status != ProjectStatus.IN_PROGRESS.value
        ):
            raise InvalidProjectStateError(
                current=project.status,
                required=ProjectStatus.IN_PROGRESS.value,
                action=f"mark project '{status.value}'",
            )

        project.status = ProjectStatus.COMPLETED.value
        project = await self.repository.update(project)
        await self.session.commit()
        logger.info(f"Project {project.id} completed by freelancer {caller.id}")

        await self.sink.append(
            user_id=project.client_id,
            type=NotificationType.PROJECT_COMPLETED,
            title="Project Completed",
            message=f'The project "{project.title}" has been marked as completed.',
            related_id=project.id,
            action_url=project_url(project.id),
        )
        return project
