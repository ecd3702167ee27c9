"""Project repository for database operations."""

import uuid
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import json_list_ilike
from app.db.models.project import Project


@dataclass
class ProjectFilter:
    """Search criteria for the public project listing."""

    q: str | None = None
    category: str | None = None
    min_budget: float | None = None
    max_budget: float | None = None
    statuses: list[str] | None = None
    skills: list[str] | None = None


SORTABLE_COLUMNS = {
    "created_at": Project.created_at,
    "budget": Project.budget,
    "title": Project.title,
}


class ProjectRepository:
    """Repository for Project CRUD operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, project: Project) -> Project:
        """Create a new project."""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def get_by_id(self, project_id: uuid.UUID) -> Project | None:
        """Get project by ID."""
        result = await self.session.execute(
            select(Project).where(Project.id == project_id)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> Sequence[Project]:
        """Get all projects."""
        result = await self.session.execute(
            select(Project).order_by(Project.created_at.desc())
        )
        return result.scalars().all()

    async def get_by_client(
        self,
        client_id: uuid.UUID,
        statuses: list[str] | None = None,
    ) -> Sequence[Project]:
        """Get projects owned by a client, most recently updated first."""
        stmt = select(Project).where(Project.client_id == client_id)
        if statuses:
            stmt = stmt.where(Project.status.in_(statuses))
        result = await self.session.execute(stmt.order_by(Project.updated_at.desc()))
        return result.scalars().all()

    async def get_by_freelancer(
        self,
        freelancer_id: uuid.UUID,
        statuses: list[str],
    ) -> Sequence[Project]:
        """Get projects assigned to a freelancer, most recently updated first."""
        result = await self.session.execute(
            select(Project)
            .where(
                Project.selected_freelancer_id == freelancer_id,
                Project.status.in_(statuses),
            )
            .order_by(Project.updated_at.desc())
        )
        return result.scalars().all()

    def _apply_filter(self, stmt, criteria: ProjectFilter):
        dialect = self.session.get_bind().dialect.name
        if criteria.statuses:
            stmt = stmt.where(Project.status.in_(criteria.statuses))
        if criteria.q:
            pattern = f"%{criteria.q}%"
            stmt = stmt.where(
                or_(
                    Project.title.ilike(pattern),
                    Project.description.ilike(pattern),
                    json_list_ilike(dialect, Project.requirements, [pattern]),
                )
            )
        if criteria.category:
            stmt = stmt.where(Project.category == criteria.category)
        if criteria.min_budget is not None:
            stmt = stmt.where(Project.budget >= criteria.min_budget)
        if criteria.max_budget is not None:
            stmt = stmt.where(Project.budget <= criteria.max_budget)
        if criteria.skills:
            stmt = stmt.where(
                json_list_ilike(
                    dialect,
                    Project.requirements,
                    [f"%{skill}%" for skill in criteria.skills],
                )
            )
        return stmt

    async def search(
        self,
        criteria: ProjectFilter,
        sort_by: str = "created_at",
        descending: bool = True,
        offset: int = 0,
        limit: int = 20,
    ) -> tuple[Sequence[Project], int]:
        """Search projects. Returns (page of projects, total matching count)."""
        column = SORTABLE_COLUMNS.get(sort_by, Project.created_at)
        order = column.desc() if descending else column.asc()

        stmt = self._apply_filter(select(Project), criteria)
        result = await self.session.execute(
            stmt.order_by(order).offset(offset).limit(limit)
        )
        count_stmt = self._apply_filter(select(func.count(Project.id)), criteria)
        total = (await self.session.execute(count_stmt)).scalar_one()
        return result.scalars().all(), total

    async def update(self, project: Project) -> Project:
        """Update an existing project."""
        await self.session.flush()
        await self.session.refresh(project)
        return project
