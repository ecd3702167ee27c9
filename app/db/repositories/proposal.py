"""Proposal repository for database operations."""

import uuid
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.enums import ProposalStatus
from app.db.models.proposal import Proposal


class ProposalRepository:
    """Repository for Proposal CRUD operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, proposal: Proposal) -> Proposal:
        """Create a new proposal."""
        self.session.add(proposal)
        await self.session.flush()
        await self.session.refresh(proposal)
        return proposal

    async def get_by_id(self, proposal_id: uuid.UUID) -> Proposal | None:
        """Get proposal by ID."""
        result = await self.session.execute(
            select(Proposal).where(Proposal.id == proposal_id)
        )
        return result.scalar_one_or_none()

    async def get_by_project(self, project_id: uuid.UUID) -> Sequence[Proposal]:
        """Get all proposals for a project, newest first."""
        result = await self.session.execute(
            select(Proposal)
            .where(Proposal.project_id == project_id)
            .order_by(Proposal.created_at.desc())
        )
        return result.scalars().all()

    async def get_by_freelancer(self, freelancer_id: uuid.UUID) -> Sequence[Proposal]:
        """Get all proposals submitted by a freelancer, newest first."""
        result = await self.session.execute(
            select(Proposal)
            .where(Proposal.freelancer_id == freelancer_id)
            .order_by(Proposal.created_at.desc())
        )
        return result.scalars().all()

    async def get_pending_siblings(
        self,
        project_id: uuid.UUID,
        exclude_id: uuid.UUID,
    ) -> Sequence[Proposal]:
        """Get the other pending proposals of a project."""
        result = await self.session.execute(
            select(Proposal).where(
                Proposal.project_id == project_id,
                Proposal.id != exclude_id,
                Proposal.status == ProposalStatus.PENDING.value,
            )
        )
        return result.scalars().all()

    async def update(self, proposal: Proposal) -> Proposal:
        """Update an existing proposal."""
        await self.session.flush()
        await self.session.refresh(proposal)
        return proposal
